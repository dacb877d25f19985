import abc


# To enforce the implementation of these methods such that convention is maintained.
# Note: inherit from this AFTER any other class that might implement desired default behavior.
class NdCommon(abc.ABC):
    @property
    @abc.abstractmethod
    def values(self):
        """The internal data representation."""
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def empty(self):
        """Check whether the data structure is empty.

        Returns
        -------
        bool

        """
        raise NotImplementedError

    @abc.abstractmethod
    def __len__(self):
        # length of the first axis
        raise NotImplementedError

    @abc.abstractmethod
    def __repr__(self):
        # repr without any actual data
        raise NotImplementedError

    @abc.abstractmethod
    def __str__(self):
        # representation including data
        raise NotImplementedError


class BinaryOps(abc.ABC):
    # elementwise __eq__ makes instances unhashable
    __hash__ = None

    @abc.abstractmethod
    def _comparison(self, other, comparison):
        raise NotImplementedError

    def __lt__(self, other):
        return self._comparison(other, '<')

    def __le__(self, other):
        return self._comparison(other, '<=')

    def __eq__(self, other):
        return self._comparison(other, '==')

    def __ne__(self, other):
        return self._comparison(other, '!=')

    def __ge__(self, other):
        return self._comparison(other, '>=')

    def __gt__(self, other):
        return self._comparison(other, '>')

    @abc.abstractmethod
    def _element_wise_operation(self, other, operation, reflected=False):
        raise NotImplementedError

    def __add__(self, other):
        return self._element_wise_operation(other, '+')

    def __sub__(self, other):
        return self._element_wise_operation(other, '-')

    def __mul__(self, other):
        return self._element_wise_operation(other, '*')

    def __truediv__(self, other):
        return self._element_wise_operation(other, '/')

    def __pow__(self, other):
        return self._element_wise_operation(other, 'pow')

    def __radd__(self, other):
        return self._element_wise_operation(other, '+', reflected=True)

    def __rsub__(self, other):
        return self._element_wise_operation(other, '-', reflected=True)

    def __rmul__(self, other):
        return self._element_wise_operation(other, '*', reflected=True)

    def __rtruediv__(self, other):
        return self._element_wise_operation(other, '/', reflected=True)

    def __rpow__(self, other):
        return self._element_wise_operation(other, 'pow', reflected=True)


class InPlaceOps(abc.ABC):
    @abc.abstractmethod
    def _in_place_operation(self, other, operation):
        # must return self to keep the identity of the object
        raise NotImplementedError

    def __iadd__(self, other):
        return self._in_place_operation(other, '+')

    def __isub__(self, other):
        return self._in_place_operation(other, '-')

    def __imul__(self, other):
        return self._in_place_operation(other, '*')

    def __itruediv__(self, other):
        return self._in_place_operation(other, '/')


class BitOps(abc.ABC):
    @abc.abstractmethod
    def _bitwise_operation(self, other, operation):
        raise NotImplementedError

    def __and__(self, other):
        return self._bitwise_operation(other, '&')

    def __or__(self, other):
        return self._bitwise_operation(other, '|')

    def __invert__(self):
        return self._bitwise_operation(None, '~')


class IndexCommon(abc.ABC):
    @property
    @abc.abstractmethod
    def name(self):
        """Name of the Index.

        Returns
        -------
        str
            name

        """
        raise NotImplementedError

    @abc.abstractmethod
    def _iloc_indices(self, indices):
        """Select based on positions.

        Parameters
        ----------
        indices : numpy.ndarray

        """
        raise NotImplementedError

    @abc.abstractmethod
    def _gather_names(self, name='index'):
        # returns the names of the index columns as a list replacing None's with default values
        raise NotImplementedError

    @abc.abstractmethod
    def _gather_data(self, name='index'):
        # returns a dict of names to Indexes
        raise NotImplementedError

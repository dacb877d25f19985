from .csv import read_csv, to_csv, write_rows

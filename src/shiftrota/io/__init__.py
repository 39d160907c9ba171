# shiftrota/io - Input/output handling
from .csv_loader import employees_to_dataframe, load_employees, load_holidays, load_leaves, save_employees

__all__ = ["load_employees", "save_employees", "load_holidays", "load_leaves", "employees_to_dataframe"]

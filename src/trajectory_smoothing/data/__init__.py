from .point_table import clean, extract_columns, extract_rows, load_points, save_points

__all__ = [
    "clean",
    "extract_columns",
    "extract_rows",
    "load_points",
    "save_points",
]

app_name = "sassz"
__version__ = "0.4.0"

from sdlgen.logger import get_logger

__author__ = """sdlgen contributors"""
__version__ = "0.1.0"

log = get_logger("sdlgen")

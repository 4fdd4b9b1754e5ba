"""FaultNote - log errors, problems and solutions to Notion from the terminal"""

__version__ = "0.1.0"

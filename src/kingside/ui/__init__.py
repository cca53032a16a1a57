"""PyQt6 front end: board rendering, input handling and game messages."""

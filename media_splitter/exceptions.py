"""Custom exceptions for the media splitter worker"""

class SplitterError(Exception):
    """Base exception for all media splitter errors"""
    def __init__(self, message: str, module: str = None):
        self.message = message
        self.module = module or "unknown"
        super().__init__(f"[{self.module}] {self.message}")

class ConfigurationError(SplitterError):
    """Invalid or incomplete job parameters"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"Configuration error: {message}", module)

class ProcessingError(SplitterError):
    """Job could not be processed (e.g. source media unreadable)"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"Processing error: {message}", module)

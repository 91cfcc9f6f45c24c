"""Custom exceptions for the food entry parser."""


class ParserConfigError(Exception):
    """Raised when a parser configuration file contains invalid values."""

    def __init__(self, config_path: str, detail: str):
        """Initialize exception with config path and problem description.
        
        Args:
            config_path: Path of the YAML file being loaded
            detail: What is wrong with it
        """
        self.config_path = config_path
        self.detail = detail
        super().__init__(f"Invalid parser config '{config_path}': {detail}")

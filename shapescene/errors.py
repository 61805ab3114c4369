class InvalidDimension(ValueError):
    """Raised when a shape is constructed with a dimension it cannot have."""

    def __init__(self, message: str, shape_name: str, dimension_name: str, value):
        super().__init__(message)
        self.shape_name = shape_name
        self.dimension_name = dimension_name
        self.value = value

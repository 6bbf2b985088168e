DEFAULT_RTOL = 1e-9
DEFAULT_ATOL = 1e-12


class Rendering:
    OPEN = "<"
    CLOSE = ">"
    SEPARATOR = ", "

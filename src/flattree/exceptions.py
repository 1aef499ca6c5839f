class InvalidBudgetError(ValueError):
    """
    Exception raised when a tree is requested with a budget that cannot hold the root line.

    Every flattened tree contains at least its root, so the budget (the maximum number of
    lines in the output) must be a positive integer.

    Attributes:
        budget: The rejected budget value.

    Example:
        >>> error = InvalidBudgetError(0)
        >>> str(error)
        'Budget must be a positive number of lines, got 0'
    """

    def __init__(self, budget: object) -> None:
        self.budget = budget
        super().__init__(f"Budget must be a positive number of lines, got {budget!r}")

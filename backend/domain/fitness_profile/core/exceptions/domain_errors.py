"""Domain exceptions for fitness profiles."""


class FitnessProfileDomainError(Exception):
    """Base exception for fitness profile domain errors."""

    pass


class InvalidProfileDataError(FitnessProfileDomainError):
    """Raised when profile data validation fails."""

    pass


class FitnessProfileNotFoundError(FitnessProfileDomainError):
    """Raised when no profile exists for a user."""

    def __init__(self, user_id: str):
        super().__init__(f"Fitness profile not found for user: {user_id}")
        self.user_id = user_id


class ProfileAlreadyExistsError(FitnessProfileDomainError):
    """Raised when trying to create a second profile for a user."""

    def __init__(self, user_id: str):
        super().__init__(f"Profile already exists for user: {user_id}")
        self.user_id = user_id


class InvalidPlanIndexError(FitnessProfileDomainError):
    """Raised when a day or meal index does not exist in a plan."""

    def __init__(self, plan: str, index: int, size: int):
        super().__init__(f"No {plan} at index {index} (plan has {size})")
        self.plan = plan
        self.index = index
        self.size = size

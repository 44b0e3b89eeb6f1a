from contactrelay.application.use_cases.relay_contact import (
    RelayContactUseCase,
    validate_submission,
)

__all__ = ["RelayContactUseCase", "validate_submission"]

"""Validation of resource settings."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable


class ValidationError(ValueError):
    """Raised when a validator rejects its input."""


class Validator(ABC):
    """Something that checks a value and raises ValidationError if it is wrong."""

    @abstractmethod
    def validate(self) -> None:
        """Raise ValidationError if the checked value is not acceptable."""


@dataclass(frozen=True)
class DockerfileValidator(Validator):
    """Checks that a Dockerfile exists in a checked-out repository and looks valid."""

    dockerfile: str
    repository_dir: str

    def validate(self) -> None:
        path = os.path.join(self.repository_dir, self.dockerfile)
        try:
            os.lstat(path)
        except OSError:
            raise ValidationError(
                "dockerfile not found, please ensure the path is correct "
                "and is relative from the repository root"
            ) from None

        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                if any(line.lower().startswith("from") for line in handle):
                    return
        except OSError:
            pass

        raise ValidationError(
            "found the specified Dockerfile but it didn't appear to be a valid Dockerfile"
        )


def validate_all(validators: Iterable[Validator]) -> None:
    """Run each validator in turn, stopping at the first failure."""
    for validator in validators:
        validator.validate()
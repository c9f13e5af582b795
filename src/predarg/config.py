"""
View configuration for predarg.

This module defines the ViewConfig dataclass that captures the configurable
parameters of a predicate-argument view: its name, the generator that produced
it, the view score, the attribute keys holding lemma and sense, and the
duplicate-registration policy.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from predarg.constants import (
    DEFAULT_VIEW_SCORE,
    LEMMA_ATTRIBUTE,
    SENSE_ATTRIBUTE,
    VIEW_GENERATOR_SUFFIX,
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ViewConfig:
    """
    Configuration for a predicate-argument view.

    Attributes:
        view_name: Name of the view (e.g., "SRL_VERB").
        view_generator: Name of the annotator that produced the view.
            If None, derived as "<view_name>-annotator".
        score: View-level confidence score.
        reject_duplicate_predicates: If True, registering a predicate that is
            already registered raises DuplicatePredicateError. If False the
            predicate is appended again and a warning is logged.
        lemma_attribute: Attribute key holding an explicit predicate lemma.
        sense_attribute: Attribute key holding an explicit predicate sense.
    """

    view_name: str
    view_generator: Optional[str] = None
    score: float = DEFAULT_VIEW_SCORE
    reject_duplicate_predicates: bool = False
    lemma_attribute: str = LEMMA_ATTRIBUTE
    sense_attribute: str = SENSE_ATTRIBUTE

    def __post_init__(self):
        """Derive the generator name and coerce the score."""
        if not self.view_name:
            raise ValueError("view_name must be a non-empty string")

        if self.view_generator is None:
            self.view_generator = self.view_name + VIEW_GENERATOR_SUFFIX

        self.score = float(self.score)

    @classmethod
    def from_env(
        cls,
        view_name: Optional[str] = None,
        prefix: str = "PREDARG_",
        dotenv_path: Optional[Union[str, Path]] = None,
    ) -> "ViewConfig":
        """
        Build a configuration from environment variables.

        A .env file is loaded first (without overriding variables already set).
        Recognized variables, with the default prefix:
            PREDARG_VIEW_NAME, PREDARG_VIEW_GENERATOR, PREDARG_SCORE,
            PREDARG_REJECT_DUPLICATE_PREDICATES

        Args:
            view_name: Explicit view name; takes precedence over the environment.
            prefix: Environment variable prefix.
            dotenv_path: Path to a .env file. If None, python-dotenv searches
                upward from the current directory.

        Returns:
            ViewConfig populated from the environment.
        """
        load_dotenv(dotenv_path=dotenv_path, override=False)

        name = view_name or os.environ.get(f"{prefix}VIEW_NAME")
        if not name:
            raise ValueError(f"No view name given and {prefix}VIEW_NAME is not set")

        kwargs = {"view_name": name}

        generator = os.environ.get(f"{prefix}VIEW_GENERATOR")
        if generator:
            kwargs["view_generator"] = generator

        score = os.environ.get(f"{prefix}SCORE")
        if score:
            kwargs["score"] = float(score)

        reject = os.environ.get(f"{prefix}REJECT_DUPLICATE_PREDICATES")
        if reject is not None:
            kwargs["reject_duplicate_predicates"] = reject.strip().lower() in _TRUE_VALUES

        config = cls(**kwargs)
        logger.debug(f"Loaded view config from environment: {config}")
        return config

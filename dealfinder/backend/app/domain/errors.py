# app/domain/errors.py
from __future__ import annotations


class DealFinderError(Exception):
    """Base for every error the find-deals pipeline surfaces."""


class ValidationError(DealFinderError):
    """Caller omitted the required query. Raised before any source is touched."""


class DataSourceError(DealFinderError):
    """A listing source could not produce listings."""


class ScoringError(DealFinderError):
    """
    A single scoring rule failed for a single listing.
    Caught per listing by the scorer; never fails the batch.
    """

#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/errors.py - Error taxonomy for the SVD recommender
Author: YourName
Date: 2026-10-18
Description: Exceptions raised while building and using the SVD model
"""


class SVDRecommenderError(Exception):
    """Base class for every error raised by the recommender"""


class InvalidInputError(SVDRecommenderError, ValueError):
    """Malformed input, e.g. duplicate IDs or a bad feature count"""


class UnknownIdError(SVDRecommenderError, LookupError):
    """A user or item ID outside the enumerated universe"""

    def __init__(self, kind, id_):
        self.kind = kind
        self.id = id_
        super().__init__(f"unknown {kind} ID: {id_}")

    def __str__(self):
        return self.args[0]


class InsufficientRankError(SVDRecommenderError, ValueError):
    """Requested more latent features than the matrix rank bound allows"""

    def __init__(self, requested, available):
        self.requested = requested
        self.available = available
        super().__init__(
            f"requested {requested} latent features but the rating matrix "
            f"supports at most {available}"
        )


class InternalConsistencyError(SVDRecommenderError):
    """Dimension mismatch between mappings and feature matrices"""


class UpstreamCollaboratorError(SVDRecommenderError):
    """Failure raised by a baseline scorer or a data-access object

    The original exception is available as ``__cause__``.
    """

    def __init__(self, collaborator, message):
        self.collaborator = collaborator
        super().__init__(f"{collaborator} failed: {message}")

"""Stored account credential model."""

from __future__ import annotations

from pydantic import BaseModel


class StoredCredential(BaseModel):
    """Identity/secret pair persisted to the per-user credential file.

    ``user`` is the e-mail address used to sign in, ``password`` the API key
    created from the account profile.
    """

    model_config = {"extra": "forbid"}

    user: str
    password: str

"""Thin wrapper over the hosted backend's client (auth + storage bucket).

Table access goes through SQLAlchemy against the same hosted Postgres; this
module only covers what needs the provider SDK.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from supabase import Client, create_client

from burganhome.app.common.errors import CollaboratorError, NotConfiguredError

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Credentials rejected by the identity provider."""


@dataclass
class SignedIn:
    user_id: str
    email: str
    access_token: str
    refresh_token: Optional[str] = None


class HostedBackend:
    def __init__(self, url: str = "", key: str = ""):
        self.url = url
        self.key = key
        self._storage_client: Optional[Client] = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "HostedBackend":
        backend = cls(config.get("SUPABASE_URL", ""), config.get("SUPABASE_ANON_KEY", ""))
        if not backend.configured:
            logger.warning("Hosted backend is not configured (SUPABASE_URL / SUPABASE_ANON_KEY); admin login and image storage are disabled")
        return backend

    @property
    def configured(self) -> bool:
        return bool(self.url and self.key)

    def _new_client(self) -> Client:
        if not self.configured:
            raise NotConfiguredError("Hosted backend client is not initialized")
        return create_client(self.url, self.key)

    def _storage(self) -> Client:
        if self._storage_client is None:
            self._storage_client = self._new_client()
        return self._storage_client

    # --- auth ---
    def sign_in(self, email: str, password: str) -> SignedIn:
        # A fresh client per sign-in keeps one visitor's session out of another's.
        client = self._new_client()
        try:
            res = client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as exc:  # provider SDK raises its own AuthApiError family
            raise AuthenticationError(str(exc)) from exc

        if res.user is None or res.session is None:
            raise AuthenticationError("Invalid login credentials")
        return SignedIn(
            user_id=str(res.user.id),
            email=res.user.email or email,
            access_token=res.session.access_token,
            refresh_token=res.session.refresh_token,
        )

    # --- storage ---
    def upload_image(self, bucket: str, file_name: str, data: bytes, content_type: str) -> str:
        """Upload and return the public URL."""
        storage = self._storage().storage.from_(bucket)
        try:
            storage.upload(
                path=file_name,
                file=data,
                file_options={"content-type": content_type, "cache-control": "3600", "upsert": "false"},
            )
        except Exception as exc:
            raise CollaboratorError(f"Upload failed: {exc}") from exc
        return storage.get_public_url(file_name)

    def delete_image(self, bucket: str, file_name: str) -> None:
        try:
            self._storage().storage.from_(bucket).remove([file_name])
        except NotConfiguredError:
            raise
        except Exception as exc:
            raise CollaboratorError(f"Failed to delete image: {exc}") from exc

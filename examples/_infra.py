from __future__ import annotations

import logging
import sys
from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, Field

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    avatar_image_url: str = Field(alias="avatarImageUrl")

    @property
    def primary_key(self) -> str:
        return f"user:{self.id}"


_USERS = {
    1: {"id": 1, "name": "Ada", "avatarImageUrl": "https://img.example.com/ada.png"},
    2: {"id": 2, "name": "Grace", "avatarImageUrl": "https://img.example.com/grace.png"},
}


def fake_user_api(request: httpx.Request) -> httpx.Response:
    """Serves /user/<id> from memory; anything else is a 404."""
    *_, user_id = request.url.path.rstrip("/").split("/")
    if not user_id.isdigit() or int(user_id) not in _USERS:
        return httpx.Response(404, json={"error": "not found"})
    return httpx.Response(200, json=_USERS[int(user_id)])


def fake_client() -> httpx.Client:
    return httpx.Client(
        base_url="https://users.example.com",
        transport=httpx.MockTransport(fake_user_api),
    )


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def setup_logging() -> None:  # pragma: no cover (examples only)
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

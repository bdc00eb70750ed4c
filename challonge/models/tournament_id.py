from typing import Optional

from pydantic import BaseModel, model_validator


class TournamentId(BaseModel):
    """Addresses a tournament either by numeric id or by subdomain and url."""

    id: Optional[int] = None
    subdomain: Optional[str] = None
    url: Optional[str] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def exactly_one_form(self):
        has_url = self.subdomain is not None or self.url is not None
        if self.id is None and not has_url:
            raise ValueError("Either id or subdomain and url must be set")
        if self.id is not None and has_url:
            raise ValueError("id cannot be combined with subdomain and url")
        if has_url and (self.subdomain is None or self.url is None):
            raise ValueError("subdomain and url must be set together")
        if self.id is not None and self.id < 0:
            raise ValueError("id must be non-negative")
        return self

    @classmethod
    def from_id(cls, tournament_id: int) -> "TournamentId":
        return cls(id=tournament_id)

    @classmethod
    def from_url(cls, subdomain: str, url: str) -> "TournamentId":
        return cls(subdomain=subdomain, url=url)

    @property
    def is_url(self) -> bool:
        return self.id is None

    def __str__(self) -> str:
        if self.is_url:
            return f"{self.subdomain}-{self.url}"
        return str(self.id)

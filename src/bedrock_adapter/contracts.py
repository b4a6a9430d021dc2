from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    region: str
    profile: str | None = None

    def __post_init__(self) -> None:
        # A blank profile means "use the default credential chain".
        if self.profile is not None:
            object.__setattr__(self, "profile", self.profile.strip() or None)


@dataclass(frozen=True)
class CompletionRequest:
    model_id: str
    user_prompt: str
    system_prompt: str | None = None
    field_name: str | None = None

    @property
    def structured(self) -> bool:
        return self.field_name is not None

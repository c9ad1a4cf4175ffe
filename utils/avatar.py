from dataclasses import dataclass
from typing import Literal
from urllib.parse import urlencode

AvatarVariant = Literal["initials", "bottts-neutral"]

DICEBEAR_BASE_URL = "https://api.dicebear.com/9.x"


@dataclass(frozen=True)
class Avatar:
    seed: str
    variant: AvatarVariant
    uri: str
    fallback: str


def generated_avatar(seed: str, variant: AvatarVariant = "initials") -> Avatar:
    """Deterministic avatar for `seed`: the same seed always gives the same URI."""
    params = {"seed": seed}
    if variant == "initials":
        params.update({"fontWeight": 500, "fontSize": 42})
    elif variant != "bottts-neutral":
        raise ValueError(f"Unknown avatar variant: {variant}")

    uri = f"{DICEBEAR_BASE_URL}/{variant}/svg?{urlencode(params)}"
    return Avatar(seed=seed, variant=variant, uri=uri, fallback=seed[:1].upper())

"""Anonymous workspace names for unauthenticated sandbox usage.

Names look like ``public-frostwing-417``. They only need to be unlikely to
collide; they are not secrets and carry no uniqueness guarantee.
"""

from __future__ import annotations

import random
import re

PUBLIC_PREFIX = "public"

# Upper bound of the numeric suffix (inclusive)
MAX_SUFFIX = 1000

_NAME_STARTS = (
    "amber", "ash", "bright", "cinder", "cloud", "copper", "crystal", "dawn",
    "dusk", "ember", "fern", "frost", "gold", "hazel", "iron", "jade",
    "lunar", "maple", "mist", "moss", "night", "pine", "quartz", "rain",
    "river", "sage", "silver", "snow", "storm", "sun", "thorn", "wild",
)

_NAME_ENDS = (
    "beak", "claw", "crest", "eye", "fang", "feather", "fin", "foot",
    "heart", "horn", "mane", "paw", "scale", "shade", "tail", "wing",
)

_CREATURES = (
    "badger", "bear", "crane", "falcon", "fox", "hare", "heron", "lynx",
    "moth", "otter", "owl", "raven", "salmon", "stag", "viper", "wolf",
)


def slugify(text: str) -> str:
    """Lowercase text and reduce it to word characters joined by single hyphens."""
    slug = str(text).lower()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^\w\-]+", "", slug)
    slug = re.sub(r"-{2,}", "-", slug)
    return slug.strip("-")


def random_display_name(rng: random.Random) -> str:
    """Return a human readable two-word name such as ``Frostwing Silverfox``."""
    first = rng.choice(_NAME_STARTS) + rng.choice(_NAME_ENDS)
    second = rng.choice(_NAME_STARTS) + rng.choice(_CREATURES)
    return f"{first.capitalize()} {second.capitalize()}"


def silly_name(rng: random.Random) -> str:
    slug = slugify(random_display_name(rng)).split("-")[0]
    return f"{slug}-{round(rng.random() * MAX_SUFFIX)}"


def public_workspace_name(rng: random.Random | None = None) -> str:
    """Return a workspace name of the form ``public-<slug>-<0..1000>``."""
    return f"{PUBLIC_PREFIX}-{silly_name(rng or random.Random())}"

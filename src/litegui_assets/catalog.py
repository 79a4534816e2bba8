"""The fixed list of asset families produced by a build.

Order matters only for the log: families are independent of each other,
except that the boot family writes the frames its shutdown copies read.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from litegui_assets.errors import ConfigurationError
from litegui_assets.families import boot, launcher, scales, spinner, theme_wheel, volume
from litegui_assets.frames import AssetFamily
from litegui_assets.settings.schema import GeneratorSettings

__all__ = ["all_families", "select"]


def all_families(settings: GeneratorSettings) -> List[AssetFamily]:
    return [
        *launcher.families(settings),
        boot.family(settings),
        spinner.family(settings),
        theme_wheel.family(settings),
        volume.family(settings),
        *scales.families(settings),
    ]


def select(families: Sequence[AssetFamily], names: Iterable[str]) -> List[AssetFamily]:
    """Keep families whose name, or group prefix before ``/``, is in *names*.

    ``launcher`` selects every launcher badge while ``launcher/playing``
    selects just one. Unknown names raise :class:`ConfigurationError`.
    """
    wanted = list(names)
    known = {f.name for f in families} | {f.name.split("/")[0] for f in families}
    unknown = [n for n in wanted if n not in known]
    if unknown:
        raise ConfigurationError("unknown asset family: " + ", ".join(unknown))
    return [f for f in families if f.name in wanted or f.name.split("/")[0] in wanted]

from __future__ import annotations

import logging
import sys
from importlib import metadata
from types import ModuleType
from typing import Dict, List, Mapping, Optional, Tuple

from ...domain.ports.module_inventory_port import ModuleInventoryPort

logger = logging.getLogger(__name__)


class SysModulesInventoryAdapter(ModuleInventoryPort):
    """Reports the top-level modules currently in ``sys.modules``.

    Modules without a backing file (built-in, frozen or created at runtime) are
    skipped. A module that belongs to an installed distribution is reported
    under the distribution name with its installed version; otherwise its
    ``__version__`` attribute is used. Modules with neither are left out.
    """

    def __init__(self, modules: Optional[Mapping[str, Optional[ModuleType]]] = None):
        self._modules = modules

    def loaded_modules(self) -> List[Tuple[str, str]]:
        modules = dict(self._modules if self._modules is not None else sys.modules)
        distributions = self._packages_distributions()
        found: Dict[str, str] = {}

        for name, module in modules.items():
            if module is None or "." in name or not getattr(module, "__file__", None):
                continue
            recorded = False
            for dist_name in distributions.get(name, []):
                version = self._distribution_version(dist_name)
                if version:
                    found.setdefault(dist_name, version)
                    recorded = True
            if recorded:
                continue
            version = getattr(module, "__version__", None)
            if isinstance(version, str) and version:
                found[name] = version

        return list(found.items())

    @staticmethod
    def _packages_distributions() -> Mapping[str, List[str]]:
        try:
            return metadata.packages_distributions()
        except Exception:
            logger.debug("Installed distributions could not be listed", exc_info=True)
            return {}

    @staticmethod
    def _distribution_version(dist_name: str) -> Optional[str]:
        try:
            return metadata.version(dist_name)
        except metadata.PackageNotFoundError:
            logger.debug("No installed version for distribution %s", dist_name)
            return None

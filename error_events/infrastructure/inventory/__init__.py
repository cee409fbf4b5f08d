from .sys_modules_adapter import SysModulesInventoryAdapter

__all__ = ["SysModulesInventoryAdapter"]

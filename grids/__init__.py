import grids.account_balance as account_balance
import grids.dashboard as dashboard
import grids.reserved_funds as reserved_funds
import grids.turnover as turnover

_GRID_MODULES = {
    module.GRID_NAME: module
    for module in (dashboard, account_balance, turnover, reserved_funds)
}


def get_grid_module(grid_name: str):
    """Get a grid module by its portal grid name."""
    if grid_name not in _GRID_MODULES:
        raise ValueError(f"Unknown grid: {grid_name}")
    return _GRID_MODULES[grid_name]


def get_available_grids():
    """Get list of supported grid names."""
    return list(_GRID_MODULES.keys())

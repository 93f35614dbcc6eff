import reflex as rx
from .auth_state import AuthState
from .ui_state import UIState
from .dashboard_state import DashboardState
from .products_state import ProductsState
from .catalog_state import CatalogState
from .suppliers_state import SuppliersState
from .sale_state import SaleState
from .sales_history_state import SalesHistoryState
from .debtors_state import DebtorsState
from .expenses_state import ExpensesState
from .users_state import UsersState
from .report_state import ReportState

_mixins = [
    ReportState,
    UsersState,
    ExpensesState,
    DebtorsState,
    SalesHistoryState,
    SaleState,
    SuppliersState,
    CatalogState,
    ProductsState,
    DashboardState,
    UIState,
    AuthState,
]

_class_dict = {
    "__module__": __name__,
    "__qualname__": "RootState",
    "__doc__": """
    Root state combining every screen mixin.
    Each mixin inherits from MixinState; screen vars carry a prefix so
    names never collide once merged.
    """,
    "__annotations__": {},
}

for _mixin in _mixins:
    # Walk the MRO so vars of nested mixins (SaleState -> CartMixin) are merged too
    for _base in reversed(_mixin.__mro__):
        if _base is object:
            continue
        _class_dict["__annotations__"].update(_base.__dict__.get("__annotations__", {}))
        for _name, _value in _base.__dict__.items():
            if _name.startswith("__"):
                continue
            _class_dict[_name] = _value

# Created with type() so BaseStateMeta processes every mixin var and handler
RootState = type("RootState", (*_mixins, rx.State), _class_dict)

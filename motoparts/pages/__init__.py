from .login import login_page
from .signup import signup_page
from .dashboard import dashboard_page
from .products import products_page
from .low_stock import low_stock_page
from .catalog import catalog_page
from .suppliers import suppliers_page
from .new_sale import new_sale_page
from .sales import sales_page
from .sale_detail import sale_detail_page
from .all_sales import all_sales_page
from .daily_sales import daily_sales_page
from .debtors import debtors_page
from .debtor_detail import debtor_detail_page
from .expenses import expenses_page
from .users import users_page
from .reports import reports_page

__all__ = [
    "login_page",
    "signup_page",
    "dashboard_page",
    "products_page",
    "low_stock_page",
    "catalog_page",
    "suppliers_page",
    "new_sale_page",
    "sales_page",
    "sale_detail_page",
    "all_sales_page",
    "daily_sales_page",
    "debtors_page",
    "debtor_detail_page",
    "expenses_page",
    "users_page",
    "reports_page",
]

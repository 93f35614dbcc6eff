import reflex as rx
from motoparts.state import State
from motoparts.pages import (
    all_sales_page,
    catalog_page,
    daily_sales_page,
    dashboard_page,
    debtor_detail_page,
    debtors_page,
    expenses_page,
    login_page,
    low_stock_page,
    new_sale_page,
    products_page,
    reports_page,
    sale_detail_page,
    sales_page,
    signup_page,
    suppliers_page,
    users_page,
)


def _toast_provider() -> rx.Component:
    return rx.toast.provider(
        position="bottom-center",
        close_button=True,
        rich_colors=True,
        toast_options=rx.toast.options(
            duration=4000,
            style={
                "fontSize": "15px",
                "padding": "14px 22px",
                "borderRadius": "12px",
                "boxShadow": "0 20px 50px rgba(15,23,42,0.25)",
            },
        ),
    )


app = rx.App(
    theme=rx.theme(appearance="light"),
    toaster=_toast_provider(),
    head_components=[
        rx.el.link(rel="preconnect", href="https://fonts.googleapis.com"),
        rx.el.link(rel="preconnect", href="https://fonts.gstatic.com", cross_origin=""),
        rx.el.link(
            href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap",
            rel="stylesheet",
        ),
    ],
)

# Public pages only run the guard, which sends signed-in users home.
app.add_page(login_page, route="/login", title="Sign in | MotoParts", on_load=State.check_auth)
app.add_page(signup_page, route="/signup", title="Create account | MotoParts", on_load=State.check_auth)

app.add_page(dashboard_page, route="/", title="Dashboard | MotoParts", on_load=[State.check_auth, State.load_dashboard])
app.add_page(products_page, route="/products", title="Products | MotoParts", on_load=[State.check_auth, State.load_products])
app.add_page(low_stock_page, route="/low-stock", title="Low Stock | MotoParts", on_load=[State.check_auth, State.load_low_stock])
for catalog_route, catalog_title in (
    ("/brands", "Brands"),
    ("/shelf-code", "Shelf Codes"),
    ("/compatible-models", "Compatible Models"),
):
    app.add_page(
        catalog_page,
        route=catalog_route,
        title=f"{catalog_title} | MotoParts",
        on_load=[State.check_auth, State.load_catalog],
    )
app.add_page(suppliers_page, route="/suppliers", title="Suppliers | MotoParts", on_load=[State.check_auth, State.load_suppliers])

app.add_page(new_sale_page, route="/sales/new", title="New Sale | MotoParts", on_load=[State.check_auth, State.load_new_sale])
app.add_page(sales_page, route="/sales", title="Sales | MotoParts", on_load=[State.check_auth, State.load_sales])
app.add_page(sale_detail_page, route="/sales/[sale_id]", title="Sale | MotoParts", on_load=[State.check_auth, State.load_sale_detail])
app.add_page(all_sales_page, route="/all-sales", title="All Sale Items | MotoParts", on_load=[State.check_auth, State.load_sale_lines])
app.add_page(daily_sales_page, route="/daily-sales", title="Today's Sales | MotoParts", on_load=[State.check_auth, State.load_daily_sales])
app.add_page(debtors_page, route="/debtors", title="Debtors | MotoParts", on_load=[State.check_auth, State.load_debtors])
app.add_page(debtor_detail_page, route="/debtors/[sale_id]", title="Debtor Sale | MotoParts", on_load=[State.check_auth, State.load_debtor_sale])

app.add_page(expenses_page, route="/expenses", title="Expenses | MotoParts", on_load=[State.check_auth, State.load_expenses])
app.add_page(users_page, route="/users", title="Users | MotoParts", on_load=[State.check_auth, State.load_users])
app.add_page(reports_page, route="/reports", title="Reports | MotoParts", on_load=[State.check_auth, State.load_report])

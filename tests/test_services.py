import pytest

from motoparts.api.client import ApiError, ApiHttpError
from motoparts.enums import CatalogKind
from motoparts.schemas.inventory_schemas import ProductDTO
from motoparts.services.auth_service import AuthService
from motoparts.services.catalog_service import CatalogService
from motoparts.services.dashboard_service import DashboardService
from motoparts.services.product_service import ProductService, stock_level
from motoparts.services.sale_service import SaleService


def test_stock_level_boundaries():
    assert stock_level(0) == "out"
    assert stock_level(1, threshold=5) == "low"
    assert stock_level(5, threshold=5) == "low"
    assert stock_level(6, threshold=5) == "in_stock"


def test_product_row_flattens_backend_product(product_payload):
    row = ProductService.product_row(product_payload(quantity=3, price=250))

    assert row["brand_name"] == "Honda"
    assert row["shelf_code"] == "A1"
    assert row["compatible_models"] == "CD 70"
    assert row["compatible_model_ids"] == [11]
    assert row["selling_price"] == 250.0
    assert row["stock_level"] == "low"


def test_product_row_without_shelf_shows_placeholder(product_payload):
    row = ProductService.product_row(product_payload(shelfCodeName=None))

    assert row["shelf_code"] == "N/A"


def test_search_in_stock_skips_sold_out_products(product_payload, api_factory):
    client = api_factory(
        {
            ("GET", "/api/v1/products"): {
                "data": [
                    product_payload(1, "Clutch Plate", quantity=0),
                    product_payload(2, "Clutch Cable", quantity=4),
                ]
            }
        }
    )

    rows = ProductService.search_in_stock(client, "clutch")

    assert [r["id"] for r in rows] == [2]
    assert client.calls[0][2]["name"] == "clutch"


def test_low_stock_sorted_by_quantity(product_payload, api_factory):
    client = api_factory(
        {
            ("GET", "/api/v1/products"): [
                product_payload(1, "Spark Plug", quantity=4),
                product_payload(2, "Air Filter", quantity=40),
                product_payload(3, "Brake Shoe", quantity=0),
            ]
        }
    )

    rows = ProductService.low_stock(client, threshold=5)

    assert [r["id"] for r in rows] == [3, 1]


def test_update_product_sends_camel_case_body(api_factory):
    client = api_factory()
    dto = ProductDTO(
        name="Chain Kit",
        sku="CK-70",
        brand_id=3,
        shelf_code_id=None,
        compatible_model_ids=[11],
        quantity_in_stock=5,
        purchase_price=900,
        selling_price=1200,
    )

    ProductService.update_product(client, 9, dto)

    method, path, body = client.calls[0]
    assert (method, path) == ("PUT", "/api/v1/products/9")
    assert body["id"] == 9
    assert body["brandId"] == 3
    assert body["sellingPrice"] == 1200


def test_login_reads_token_cookie(api_factory):
    client = api_factory({("POST", "/api/auth/login"): {"message": "ok"}})
    client.last_cookies = {"token": "jwt-value"}

    assert AuthService.login(client, "owner@shop.pk", "secret") == "jwt-value"


def test_login_without_token_fails(api_factory):
    client = api_factory({("POST", "/api/auth/login"): {"message": "ok"}})

    with pytest.raises(ApiError):
        AuthService.login(client, "owner@shop.pk", "secret")


def test_current_user_normalizes_roles(api_factory):
    client = api_factory(
        {("GET", "/api/auth/me"): {"data": {"username": "owner@shop.pk", "role": "ROLE_ADMIN"}}}
    )

    user = AuthService.current_user(client)

    assert user == {"username": "owner", "email": "owner@shop.pk", "roles": ["ROLE_ADMIN"]}


def test_catalog_bodies_differ_per_resource(api_factory):
    client = api_factory()

    CatalogService.create_entry(client, CatalogKind.BRANDS.value, "Honda", "Japanese")
    CatalogService.update_entry(client, CatalogKind.SHELF_CODES.value, 4, "B2")
    CatalogService.create_entry(client, CatalogKind.COMPATIBLE_MODELS.value, "CG 125")

    assert client.calls[0][1:] == ("/api/v1/brands", {"name": "Honda", "description": "Japanese"})
    assert client.calls[1][1:] == ("/api/v1/shelf/4", {"code": "B2"})
    assert client.calls[2][1] == "/api/v1/compatible-models"


def test_unknown_catalog_kind(api_factory):
    with pytest.raises(ValueError):
        CatalogService.list_entries(api_factory(), "colors")


def test_supplier_row_maps_backend_names():
    row = CatalogService.supplier_row(
        {"id": 2, "contactPerson": "Bilal", "company": "BK Autos", "phoneNumber": "0300"}
    )

    assert row["name"] == "Bilal"
    assert row["company_name"] == "BK Autos"
    assert row["phone"] == "0300"


def test_build_sale_body():
    cart = [
        {"product_id": 1, "quantity": 2, "unit_price": 100.0, "discount": 10.0, "tax": 5.0, "total": 189.0},
        {"product_id": 2, "quantity": 1, "unit_price": 50.0, "discount": 0.0, "tax": 0.0, "total": 50.0},
    ]

    body = SaleService.build_sale(cart, "", "PARTIAL").to_payload()

    assert body["customerName"] == "Walk-in Customer"
    assert body["paymentStatus"] == "PARTIAL"
    assert body["totalAmountSummary"] == 239.0
    assert body["quantitySoldSummary"] == 3
    assert body["saleItems"][0] == {"productId": 1, "quantitySold": 2, "totalAmount": 189.0}


def test_build_sale_rejects_empty_cart():
    with pytest.raises(ValueError):
        SaleService.build_sale([], "Ahmed", "PAID")


def test_summary_row_defaults_paid_amount_from_status():
    paid = SaleService.summary_row({"id": 1, "totalAmountSummary": 500, "paymentStatus": "paid"})
    unpaid = SaleService.summary_row({"id": 2, "totalAmountSummary": 500})

    assert paid["paid_amount"] == 500.0
    assert unpaid["payment_status"] == "UNPAID"
    assert unpaid["paid_amount"] == 0.0


def test_build_ledgers_groups_by_customer():
    summaries = [
        {"id": 1, "customer_name": "Ahmed", "total_amount": 500.0, "paid_amount": 200.0,
         "payment_status": "PARTIAL", "created_at": "2024-05-01"},
        {"id": 2, "customer_name": "ahmed ", "total_amount": 100.0, "paid_amount": 0.0,
         "payment_status": "UNPAID", "created_at": "2024-05-02"},
        {"id": 3, "customer_name": "Bilal", "total_amount": 900.0, "paid_amount": 0.0,
         "payment_status": "UNPAID", "created_at": "2024-05-03"},
        {"id": 4, "customer_name": "Bilal", "total_amount": 50.0, "paid_amount": 50.0,
         "payment_status": "PAID", "created_at": "2024-05-03"},
    ]

    ledgers = SaleService.build_ledgers(summaries)

    assert [l["name"] for l in ledgers] == ["Bilal", "Ahmed"]
    assert ledgers[0]["total_credit"] == 900.0
    assert ledgers[1]["total_credit"] == 400.0
    assert [t["sale_id"] for t in ledgers[1]["transactions"]] == [1, 2]


def test_dashboard_survives_one_failing_figure(api_factory):
    client = api_factory(
        {
            ("GET", "/api/v1/today-sale/totalSale"): {"data": 1500},
            ("GET", "/api/v1/sales/monthly-revenue"): ApiHttpError("boom", 500),
        }
    )

    stats = DashboardService.load_stats(client, include_expenses=False)

    assert stats["today_sales"] == 1500.0
    assert stats["monthly_revenue"] == 0.0
    assert "/api/v1/expenses/today" not in client.paths()


def test_dashboard_raises_when_every_figure_fails(api_factory):
    error = ApiHttpError("down", 503)
    client = api_factory(
        {
            ("GET", "/api/v1/today-sale/totalSale"): error,
            ("GET", "/api/v1/sales/monthly-revenue"): error,
        }
    )

    with pytest.raises(ApiHttpError):
        DashboardService.load_stats(client, include_expenses=False)


def test_dashboard_net_for_admins(api_factory):
    client = api_factory(
        {
            ("GET", "/api/v1/today-sale/totalSale"): 0,
            ("GET", "/api/v1/sales/monthly-revenue"): {"data": 10000},
            ("GET", "/api/v1/expenses/today"): 0,
            ("GET", "/api/v1/expenses/monthly"): {"data": {"total": 2500.5}},
        }
    )

    stats = DashboardService.load_stats(client)

    assert stats["monthly_net"] == 7499.5

import pytest

from minegocio.store import (
    Brand,
    LoadOrderError,
    PaymentMethod,
    Product,
    Store,
    ValidationError,
    is_consecutive_code,
    normalize_payment_code,
    validate_brand,
    validate_payment_method,
    validate_product,
)

PRODUCT_CODES = [100 + 2 * i for i in range(20)]


def make_brands():
    return [Brand(code, f"Marca {code}") for code in range(1, 11)]


def make_products():
    return [
        Product(code, f"Producto {code}", 100.0, 60.0, 50, (i % 10) + 1)
        for i, code in enumerate(PRODUCT_CODES)
    ]


def make_methods():
    return [
        PaymentMethod("EF", "Efectivo", 0),
        PaymentMethod("MP", "Mercado pago", -10),
        PaymentMethod("TR", "Transferencia", 5),
        PaymentMethod("TC", "Tarjeta", 20),
        PaymentMethod("CT", "Cripto", 0),
    ]


@pytest.fixture
def ready_store():
    store = Store()
    store.set_brands(make_brands())
    store.set_products(make_products())
    store.set_payment_methods(make_methods())
    store.check_ready_for_sales()
    return store


def test_validate_brand_trims_spaces():
    brand = validate_brand(3, "  Acme  ")
    assert brand == Brand(3, "Acme")


@pytest.mark.parametrize("code", [0, 11, -1])
def test_validate_brand_rejects_code_out_of_range(code):
    with pytest.raises(ValidationError):
        validate_brand(code, "Acme")


def test_validate_brand_rejects_blank_name():
    with pytest.raises(ValidationError):
        validate_brand(1, "    ")


@pytest.mark.parametrize(
    "code,expected",
    [(123, True), (321, True), (789, True), (124, False), (135, False), (100, False)],
)
def test_is_consecutive_code(code, expected):
    assert is_consecutive_code(code) is expected


def test_validate_product_accepts_valid_entry():
    product = validate_product(105, "Yerba", 10.5, 7.0, 3, 2, [1, 2, 3])
    assert product == Product(105, "Yerba", 10.5, 7.0, 3, 2)


@pytest.mark.parametrize(
    "args",
    [
        (99, "x", 1.0, 1.0, 1, 1),
        (1000, "x", 1.0, 1.0, 1, 1),
        (123, "x", 1.0, 1.0, 1, 1),
        (105, "", 1.0, 1.0, 1, 1),
        (105, "x", 0, 1.0, 1, 1),
        (105, "x", 1.0, 0, 1, 1),
        (105, "x", 1.0, 1.0, 0, 1),
        (105, "x", 1.0, 1.0, 1, 0),
        (105, "x", 1.0, 1.0, 1, 9),
    ],
)
def test_validate_product_rejects(args):
    with pytest.raises(ValidationError):
        validate_product(*args, [1, 2, 3])


def test_normalize_payment_code():
    assert normalize_payment_code("ef") == "EF"
    assert normalize_payment_code("mP") == "MP"


def test_validate_payment_method_normalizes():
    method = validate_payment_method("tc", "Tarjeta", 15, [])
    assert method == PaymentMethod("TC", "Tarjeta", 15)


def test_validate_payment_method_rejects_unknown_and_taken():
    with pytest.raises(ValidationError):
        validate_payment_method("XX", "Nada", 0, [])
    with pytest.raises(ValidationError):
        validate_payment_method("ef", "Efectivo", 0, ["EF"])


def test_set_brands_requires_ten():
    store = Store()
    with pytest.raises(ValidationError):
        store.set_brands(make_brands()[:9])
    assert store.brands_loaded is False


def test_set_products_requires_brands():
    store = Store()
    with pytest.raises(LoadOrderError) as info:
        store.set_products(make_products())
    assert info.value.missing == ["brands"]


def test_partial_product_lot_is_kept_but_not_complete():
    store = Store()
    store.set_brands(make_brands())
    store.set_products(make_products()[:5])
    assert len(store.products) == 5
    assert store.products_loaded is False


def test_set_products_rejects_unknown_brand():
    store = Store()
    store.set_brands(make_brands())
    with pytest.raises(ValidationError):
        store.set_products([Product(105, "x", 1.0, 1.0, 1, 42)])


def test_set_payment_methods_rejects_duplicates():
    store = Store()
    methods = make_methods()
    methods[1] = PaymentMethod("EF", "Otra", 0)
    with pytest.raises(ValidationError):
        store.set_payment_methods(methods)


def test_lookups(ready_store):
    assert ready_store.has_product(PRODUCT_CODES[3])
    assert not ready_store.has_product(999)
    assert ready_store.product_index(PRODUCT_CODES[3]) == 3
    assert ready_store.payment_index("TR") == 2
    assert ready_store.has_payment_method("CT")
    assert not ready_store.has_payment_method("ct")
    with pytest.raises(KeyError):
        ready_store.product_index(999)
    with pytest.raises(KeyError):
        ready_store.payment_index("XX")


def test_check_ready_lists_missing_lots():
    store = Store()
    store.set_brands(make_brands())
    with pytest.raises(LoadOrderError) as info:
        store.check_ready_for_sales()
    assert info.value.missing == ["products", "payment methods"]


def test_record_sale_with_no_percentage(ready_store):
    code = PRODUCT_CODES[0]
    amount = ready_store.record_sale(code, "EF", 3, 7, 15)
    product = ready_store.products[0]
    assert amount == pytest.approx(product.sale_price * 3)
    assert ready_store.revenue_by_product[0] == pytest.approx(amount)
    assert ready_store.units_by_product[0] == 3
    assert product.stock == 47
    assert ready_store.purchases_by_client[7] == 1
    assert ready_store.total_sales == 1


def test_record_sale_applies_discount_and_surcharge(ready_store):
    code = PRODUCT_CODES[1]
    plain = ready_store.record_sale(code, "EF", 1, 1, 1)
    discounted = ready_store.record_sale(code, "MP", 1, 1, 1)
    surcharged = ready_store.record_sale(code, "TC", 1, 1, 1)
    assert discounted < plain < surcharged


def test_record_sale_tracks_brand_and_payment(ready_store):
    product = ready_store.products[4]
    ready_store.record_sale(product.code, "TR", 2, 10, 30)
    ready_store.record_sale(product.code, "TR", 5, 11, 1)
    assert ready_store.units_by_brand_payment[product.brand_code - 1][2] == 7
    assert ready_store.sales_by_payment == [0, 0, 2, 0, 0]
    assert sum(ready_store.purchases_by_client.values()) == ready_store.total_sales


@pytest.mark.parametrize(
    "args",
    [
        (999, "EF", 1, 1, 1),
        (100, "XX", 1, 1, 1),
        (100, "EF", 0, 1, 1),
        (100, "EF", 1, 0, 1),
        (100, "EF", 1, 51, 1),
        (100, "EF", 1, 1, 0),
        (100, "EF", 1, 1, 31),
    ],
)
def test_record_sale_rejects_invalid(ready_store, args):
    with pytest.raises(ValidationError):
        ready_store.record_sale(*args)
    assert ready_store.total_sales == 0
    assert ready_store.units_by_product[0] == 0


def test_new_batch_resets_batch_counters_only(ready_store):
    ready_store.record_sale(PRODUCT_CODES[0], "EF", 2, 3, 4)
    ready_store.check_ready_for_sales()
    assert ready_store.total_sales == 0
    assert ready_store.sales_by_payment == [0, 0, 0, 0, 0]
    assert ready_store.units_by_product[0] == 2
    assert ready_store.purchases_by_client[3] == 1


def test_record_sale_requires_loaded_lots():
    store = Store()
    with pytest.raises(LoadOrderError):
        store.record_sale(100, "EF", 1, 1, 1)
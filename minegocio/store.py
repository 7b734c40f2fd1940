"""Master data and sales bookkeeping for a small shop."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

MAX_BRANDS = 10
MAX_PRODUCTS = 20
PAYMENT_METHOD_COUNT = 5
VALID_PAYMENT_CODES: tuple[str, ...] = ("EF", "MP", "TR", "TC", "CT")
PAYMENT_CODE_LABELS: dict[str, str] = {
    "EF": "Efectivo",
    "MP": "Mercado pago",
    "TR": "Transferencia",
    "TC": "Tarjeta de crédito",
    "CT": "Criptomoneda",
}
MIN_CLIENT, MAX_CLIENT = 1, 50
MIN_DAY, MAX_DAY = 1, 30


class ValidationError(ValueError):
    """Raised when entered data does not meet the shop's rules."""


class LoadOrderError(RuntimeError):
    """Raised when a lot is loaded before the lots it depends on."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__("missing lots: " + ", ".join(self.missing))


@dataclass
class Brand:
    code: int
    name: str


@dataclass
class Product:
    code: int
    name: str
    sale_price: float
    purchase_price: float
    stock: int
    brand_code: int


@dataclass
class PaymentMethod:
    code: str
    name: str
    percentage: int


def validate_brand(code: int, name: str) -> Brand:
    """Check a brand entry and return it with its name trimmed of spaces."""
    if not MIN_CLIENT <= code <= MAX_BRANDS:
        raise ValidationError(f"brand code must be between 1 and {MAX_BRANDS}")
    trimmed = name.strip(" ")
    if not trimmed:
        raise ValidationError("brand name must not be empty")
    return Brand(code, trimmed)


def is_consecutive_code(code: int) -> bool:
    """Tell whether the three digits of a code run up or down by one."""
    first, second, third = code // 100, (code // 10) % 10, code % 10
    rising = first + 1 == second and second + 1 == third
    falling = first - 1 == second and second - 1 == third
    return rising or falling


def validate_product(
    code: int,
    name: str,
    sale_price: float,
    purchase_price: float,
    stock: int,
    brand_code: int,
    brand_codes: Iterable[int],
) -> Product:
    """Check a product entry against the shop's rules and known brands."""
    if not 100 <= code <= 999:
        raise ValidationError("product code must have three digits")
    if is_consecutive_code(code):
        raise ValidationError("product code must not be consecutive")
    if not name:
        raise ValidationError("product name must not be empty")
    if sale_price == 0:
        raise ValidationError("sale price is required")
    if purchase_price == 0:
        raise ValidationError("purchase price is required")
    if stock == 0:
        raise ValidationError("available stock is required")
    if brand_code == 0:
        raise ValidationError("brand code is required")
    if brand_code not in set(brand_codes):
        raise ValidationError(f"brand code {brand_code} is not loaded")
    return Product(code, name, sale_price, purchase_price, stock, brand_code)


def normalize_payment_code(code: str) -> str:
    """Upper-case the first two letters of a payment code."""
    return code[:2].upper() + code[2:]


def validate_payment_method(
    code: str, name: str, percentage: int, taken_codes: Iterable[str]
) -> PaymentMethod:
    """Check a payment method entry; its code must be known and unused."""
    normalized = normalize_payment_code(code)
    if normalized not in VALID_PAYMENT_CODES or normalized in set(taken_codes):
        raise ValidationError(f"payment code {code!r} is repeated or invalid")
    return PaymentMethod(normalized, name, percentage)


class Store:
    """Brands, products, payment methods and the sales recorded against them."""

    def __init__(self) -> None:
        self.brands: list[Brand] = []
        self.products: list[Product] = []
        self.payment_methods: list[PaymentMethod] = []
        self.brands_loaded = False
        self.products_loaded = False
        self.payment_methods_loaded = False

        self.units_by_product: list[int] = [0] * MAX_PRODUCTS
        self.revenue_by_product: list[float] = [0.0] * MAX_PRODUCTS
        self.purchases_by_client: Counter[int] = Counter()
        self.units_by_brand_payment: list[list[int]] = [
            [0] * PAYMENT_METHOD_COUNT for _ in range(MAX_BRANDS)
        ]
        self.sales_by_payment: list[int] = [0] * PAYMENT_METHOD_COUNT
        self.total_sales = 0

    @property
    def brand_codes(self) -> list[int]:
        return [brand.code for brand in self.brands]

    def set_brands(self, brands: Iterable[Brand]) -> None:
        """Replace the brand lot; it must hold exactly ten brands."""
        brands = list(brands)
        if len(brands) != MAX_BRANDS:
            raise ValidationError(f"exactly {MAX_BRANDS} brands are required")
        self.brands = brands
        self.brands_loaded = True

    def set_products(self, products: Iterable[Product]) -> None:
        """Replace the product lot; it counts as complete with twenty products."""
        if not self.brands_loaded:
            raise LoadOrderError(["brands"])
        products = list(products)
        if len(products) > MAX_PRODUCTS:
            raise ValidationError(f"at most {MAX_PRODUCTS} products can be loaded")
        known = set(self.brand_codes)
        for product in products:
            if product.brand_code not in known:
                raise ValidationError(
                    f"brand code {product.brand_code} is not loaded"
                )
        self.products = products
        self.products_loaded = len(products) == MAX_PRODUCTS

    def set_payment_methods(self, methods: Iterable[PaymentMethod]) -> None:
        """Replace the payment method lot; it must hold five distinct codes."""
        methods = list(methods)
        if len(methods) != PAYMENT_METHOD_COUNT:
            raise ValidationError(
                f"exactly {PAYMENT_METHOD_COUNT} payment methods are required"
            )
        codes = [method.code for method in methods]
        if len(set(codes)) != len(codes):
            raise ValidationError("payment method codes must be distinct")
        if any(code not in VALID_PAYMENT_CODES for code in codes):
            raise ValidationError("unknown payment method code")
        self.payment_methods = methods
        self.payment_methods_loaded = True

    def has_product(self, code: int) -> bool:
        return any(product.code == code for product in self.products)

    def has_payment_method(self, code: str) -> bool:
        return any(method.code == code for method in self.payment_methods)

    def product_index(self, code: int) -> int:
        """Position of the product with this code; KeyError if unknown."""
        for index, product in enumerate(self.products):
            if product.code == code:
                return index
        raise KeyError(code)

    def payment_index(self, code: str) -> int:
        """Position of the payment method with this code; KeyError if unknown."""
        for index, method in enumerate(self.payment_methods):
            if method.code == code:
                return index
        raise KeyError(code)

    def _missing_lots(self) -> list[str]:
        missing = []
        if not self.brands_loaded:
            missing.append("brands")
        if not self.products_loaded:
            missing.append("products")
        if not self.payment_methods_loaded:
            missing.append("payment methods")
        return missing

    def check_ready_for_sales(self) -> None:
        """Start a sales batch.

        Raises LoadOrderError unless every lot is loaded; otherwise resets
        the sales count and the per-payment-method counts of the batch.
        """
        missing = self._missing_lots()
        if missing:
            raise LoadOrderError(missing)
        self.total_sales = 0
        self.sales_by_payment = [0] * PAYMENT_METHOD_COUNT

    def record_sale(
        self,
        product_code: int,
        payment_code: str,
        quantity: int,
        client_code: int,
        day: int,
    ) -> float:
        """Register one sale and return the amount charged for it."""
        missing = self._missing_lots()
        if missing:
            raise LoadOrderError(missing)
        if not self.has_product(product_code):
            raise ValidationError(f"unknown product code {product_code}")
        if not self.has_payment_method(payment_code):
            raise ValidationError(f"unknown payment method {payment_code!r}")
        if quantity <= 0:
            raise ValidationError("quantity sold must be greater than 0")
        if not MIN_CLIENT <= client_code <= MAX_CLIENT:
            raise ValidationError(
                f"client code must be between {MIN_CLIENT} and {MAX_CLIENT}"
            )
        if not MIN_DAY <= day <= MAX_DAY:
            raise ValidationError(f"day must be between {MIN_DAY} and {MAX_DAY}")

        product_pos = self.product_index(product_code)
        payment_pos = self.payment_index(payment_code)
        product = self.products[product_pos]
        method = self.payment_methods[payment_pos]

        factor = 1 + method.percentage / 100.0
        amount = product.sale_price * quantity * factor

        self.revenue_by_product[product_pos] += amount
        self.units_by_product[product_pos] += quantity
        product.stock -= quantity

        brand_index = product.brand_code - 1
        if 0 <= brand_index < MAX_BRANDS:
            self.units_by_brand_payment[brand_index][payment_pos] += quantity

        self.sales_by_payment[payment_pos] += 1
        self.total_sales += 1
        self.purchases_by_client[client_code] += 1
        return amount
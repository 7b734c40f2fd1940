"""Sales reports and data tables for the shop."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Sequence, TypeVar

from minegocio.store import (
    MAX_CLIENT,
    MIN_CLIENT,
    LoadOrderError,
    PaymentMethod,
    Product,
    Store,
)

T = TypeVar("T")

TOP_CLIENTS = 10
WINNERS = 3

_RULE_61 = "─" * 61
_RULE_37 = "─" * 37
_RULE_43 = "─" * 43
_RULE_50 = "─" * 50
_RULE_89 = "─" * 89


@dataclass(frozen=True)
class RevenueRow:
    """One line of the revenue-by-product report."""

    code: int
    name: str
    units: int
    revenue: float
    stock: int


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _gap(value: float) -> str:
    if value < 10:
        return " " * 9
    if value < 100:
        return " " * 8
    return " " * 7


def revenue_by_product(store: Store) -> list[RevenueRow]:
    """Products with their sold units and revenue, most units sold first.

    Products with equal units keep their loading order.
    """
    rows = [
        RevenueRow(
            code=product.code,
            name=product.name,
            units=units,
            revenue=revenue,
            stock=product.stock,
        )
        for product, units, revenue in zip(
            store.products, store.units_by_product, store.revenue_by_product
        )
    ]
    return sorted(rows, key=lambda row: row.units, reverse=True)


def format_revenue_report(store: Store) -> str:
    """Render report 1; raises LoadOrderError if products are not loaded."""
    if not store.products_loaded:
        raise LoadOrderError(["products"])
    lines = [
        _RULE_61,
        "                   RECAUDACIÓN POR PRODUCTO                  ",
        _RULE_61,
        "Código   Vendido   Recaudado     Stock   Nombre",
        _RULE_61,
    ]
    for row in revenue_by_product(store):
        lines.append(
            f"{row.code}       {row.units}{_gap(row.units)}"
            f"{row.revenue:.2f}{_gap(row.revenue)}"
            f"{row.stock}       {row.name}"
        )
    return _join(lines)


def payment_share(store: Store) -> list[tuple[PaymentMethod, float]]:
    """Percentage of sales made with each payment method.

    Empty when no sales have been recorded.
    """
    if store.total_sales == 0:
        return []
    return [
        (method, count / store.total_sales * 100)
        for method, count in zip(store.payment_methods, store.sales_by_payment)
    ]


def format_payment_share_report(store: Store) -> str:
    """Render report 2."""
    lines = [
        _RULE_61,
        "           PORCENTAJE DE VENTAS POR FORMA DE PAGO           ",
        _RULE_61,
    ]
    shares = payment_share(store)
    if not shares:
        lines.append("No hay ventas registradas para calcular porcentajes.")
        return _join(lines)
    lines += ["Código   Porcentaje      Nombre", _RULE_61]
    for method, percentage in shares:
        lines.append(f"{method.code}       {percentage:.2f}%          {method.name}")
    lines += [_RULE_61, f"Total ventas: {store.total_sales}"]
    return _join(lines)


def format_brand_payment_report(store: Store) -> str:
    """Render report 3; needs brands and payment methods to be loaded."""
    missing = []
    if not store.brands_loaded:
        missing.append("brands")
    if not store.payment_methods_loaded:
        missing.append("payment methods")
    if missing:
        raise LoadOrderError(missing)
    lines = ["Ventas por marca y forma de pago:", ""]
    for brand in store.brands:
        units = store.units_by_brand_payment[brand.code - 1]
        lines.append(f"Marca: {brand.name}")
        lines.extend(
            f"{method.code}: {count} unidades"
            for method, count in zip(store.payment_methods, units)
        )
        lines.append("")
    return _join(lines)


def products_without_sales(store: Store) -> list[Product]:
    """Products of which no unit has been sold, in loading order."""
    return [
        product
        for product, units in zip(store.products, store.units_by_product)
        if units == 0
    ]


def format_products_without_sales(store: Store) -> str:
    """Render report 4."""
    lines = [_RULE_37, "        PRODUCTOS SIN VENTAS", _RULE_37]
    unsold = products_without_sales(store)
    lines.extend(
        f"Código: {product.code} | Nombre del producto: {product.name}."
        for product in unsold
    )
    if not unsold:
        lines.append("No hay productos sin ventas.")
    return _join(lines)


def top_clients(store: Store, limit: int = TOP_CLIENTS) -> list[tuple[int, int]]:
    """The clients with most purchases as (client, purchases) pairs.

    All clients take part, those without purchases too; ties are broken
    by the lower client code.
    """
    ranking = sorted(
        ((client, store.purchases_by_client[client])
         for client in range(MIN_CLIENT, MAX_CLIENT + 1)),
        key=lambda pair: pair[1],
        reverse=True,
    )
    return ranking[:limit]


def draw_winners(
    clients: Sequence[T], count: int = WINNERS, rng: random.Random | None = None
) -> list[T]:
    """Pick `count` distinct entries of `clients` at random."""
    if count > len(clients):
        raise ValueError(f"cannot draw {count} winners from {len(clients)} clients")
    rng = rng or random.Random()
    return rng.sample(list(clients), count)


def format_top_clients_report(
    store: Store, rng: random.Random | None = None
) -> str:
    """Render report 5: the top ten clients and three drawn winners."""
    lines = [_RULE_37, "   TOP 10 CLIENTES CON MÁS COMPRAS   ", _RULE_37]
    ranking = top_clients(store, TOP_CLIENTS)
    if not any(purchases > 0 for _, purchases in ranking):
        lines.append("No hubo compras registradas. No hay sorteo.")
        return _join(lines)
    lines += ["Cliente\t    Compras", _RULE_37]
    lines.extend(f"{client}\t    {purchases}" for client, purchases in ranking)
    lines += ["", "Clientes ganadores del cupón de descuento:", _RULE_43]
    winners = draw_winners([client for client, _ in ranking], WINNERS, rng)
    lines.extend(f"Cliente #{client}" for client in winners)
    return _join(lines)


def format_product_table(products: Iterable[Product]) -> str:
    """Render the table of loaded products."""
    header = (
        f"{'Código':<10}{' Nombre':<25}{'Precio Venta':<15}"
        f"{'Precio Compra':<15}{'Stock':<15}{'Cod. Marca':<15}"
    )
    lines = ["", _RULE_89, header, _RULE_89]
    for product in products:
        lines.append(
            f"{product.code:<10}{product.name:<25}"
            f"{product.sale_price:<15.2f}{product.purchase_price:<15.2f}"
            f"{product.stock:<15}{product.brand_code:<15}"
        )
    lines.append(_RULE_89)
    return _join(lines)


def _percentage_gap(percentage: int) -> str:
    if 0 <= percentage < 10:
        return " " * 12
    if 10 <= percentage < 100 or -10 < percentage <= -1:
        return " " * 11
    return " " * 10


def format_payment_methods_table(methods: Iterable[PaymentMethod]) -> str:
    """Render the table of loaded payment methods."""
    lines = [
        _RULE_50,
        "          TABLA FORMAS DE PAGO - LOTE 3          ",
        _RULE_50,
        "Código   Porcentaje   Nombre",
        _RULE_50,
    ]
    for method in methods:
        lines.append(
            f"{method.code}       {method.percentage}"
            f"{_percentage_gap(method.percentage)}{method.name}"
        )
    lines += [_RULE_50, "La carga se completó correctamente."]
    return _join(lines)
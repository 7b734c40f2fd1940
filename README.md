# minegocio

A small interactive console application for a shop ("Mi Negocio"). It walks
you through loading four batches of data and then produces sales reports.
The screens and messages are in Spanish.

## Installation

    pip install .

## Running

    minegocio

The command takes no options besides `--help`. The main menu offers:

1. **Ingresar Marcas** – load the 10 brands. Each needs a code from 1 to 10
   and a non-empty name; invalid answers are asked again.
2. **Ingresar Productos** – load up to 20 products. Codes have three digits
   and may not be ascending or descending runs such as `123` or `987`. Name,
   sale price, purchase price, stock and brand code are required, and the
   brand must be one already loaded. The first invalid answer stops the
   batch; the products entered so far are kept, but sales can only be
   recorded once all 20 have been loaded.
3. **Ingresar Formas de Pago** – load the 5 payment methods, one each of
   `EF`, `MP`, `TR`, `TC`, `CT` (the first two letters are upper-cased, so
   `ef` is accepted), with a name and a whole-number percentage (positive for
   a surcharge, negative for a discount).
4. **Ingresar Ventas** – record sales until purchase number `0` is entered.
   Each sale needs a product code, a payment-method code exactly as loaded, a
   quantity above 0, a client (1–50) and a day (1–30). Invalid sales are
   skipped. The amount charged is price × quantity adjusted by the payment
   method's percentage; the product's stock is reduced by the quantity.
5. **Reportes** – the reports:
   1. revenue by product, sorted by units sold (needs all products loaded);
   2. share of sales by payment method;
   3. units sold by brand and payment method (needs brands and payment
      methods loaded);
   4. products without sales;
   5. top 10 clients, with three coupon winners drawn at random from them.

Enter `0` in the main menu to quit.

## Using the library

The data model and reports can be used without the console:

```python
from minegocio.store import Brand, PaymentMethod, Product, Store
from minegocio import reports

store = Store()
store.set_brands([Brand(code, f"Marca {code}") for code in range(1, 11)])
store.set_products(
    [Product(100 + i, f"Producto {i}", 50.0, 30.0, 10, i % 10 + 1) for i in range(20)]
)
store.set_payment_methods([
    PaymentMethod("EF", "Efectivo", -10),
    PaymentMethod("MP", "Mercado pago", 0),
    PaymentMethod("TR", "Transferencia", 0),
    PaymentMethod("TC", "Tarjeta de crédito", 15),
    PaymentMethod("CT", "Criptomoneda", 5),
])

store.check_ready_for_sales()
amount = store.record_sale(product_code=100, payment_code="EF", quantity=2, client_code=7, day=3)
print(amount)  # 90.0
print(reports.format_revenue_report(store))
```

`minegocio.store` holds the `Store` with its lots and sale counters, plus the
entry checks `validate_brand`, `validate_product`, `validate_payment_method`,
`is_consecutive_code` and `normalize_payment_code`. Validation failures raise
`ValidationError`; loading products before brands, or recording sales before
all three lots are complete, raises `LoadOrderError`, whose `missing`
attribute lists the lots still needed.

`Store.check_ready_for_sales()` starts a new sales batch: it resets the total
sales count and the per-payment-method counts, while units and revenue per
product, units per brand and payment method, and purchases per client keep
accumulating.

`minegocio.reports` gives the report data (`revenue_by_product`,
`payment_share`, `products_without_sales`, `top_clients`, `draw_winners`) and
the rendered text of each report and of the product and payment-method
tables (`format_*` functions). `format_top_clients_report` and
`draw_winners` accept a `random.Random` for reproducible draws.

## Limitations

All data lives in memory only. Nothing is saved to disk, so every batch must
be loaded again each time the program starts.

## Tests

    pip install .[test]
    pytest
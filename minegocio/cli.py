"""Interactive menu for loading shop data, recording sales and reading reports."""

from __future__ import annotations

import argparse
import os
import random
import subprocess
import sys
from typing import Callable, TextIO

from minegocio.reports import (
    format_brand_payment_report,
    format_payment_methods_table,
    format_payment_share_report,
    format_product_table,
    format_products_without_sales,
    format_revenue_report,
    format_top_clients_report,
)
from minegocio.store import (
    MAX_BRANDS,
    MAX_PRODUCTS,
    PAYMENT_CODE_LABELS,
    PAYMENT_METHOD_COUNT,
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
)

_LOT_LINES = {
    "brands": "- Lote 1: Marcas",
    "products": "- Lote 2: Productos",
    "payment methods": "- Lote 3: Formas de Pago",
}

_INVALID_OPTION = "La opción ingresada no es válida. Por favor, intente nuevamente: "


def clear_screen() -> None:
    """Clear the terminal the way the platform's shell does."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


class App:
    """The shop's text menu, reading answers through `input_fn`."""

    def __init__(
        self,
        store: Store | None = None,
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store if store is not None else Store()
        self._input = input_fn
        self._out = output if output is not None else sys.stdout
        self._rng = rng if rng is not None else random.Random()

    # -- small helpers -------------------------------------------------

    def _say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _clear(self) -> None:
        isatty = getattr(self._out, "isatty", None)
        if isatty is not None and isatty():
            self._out.flush()
            clear_screen()

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _ask_int(self, prompt: str) -> int | None:
        try:
            return int(self._ask(prompt).strip())
        except ValueError:
            return None

    def _ask_float(self, prompt: str) -> float | None:
        try:
            return float(self._ask(prompt).strip())
        except ValueError:
            return None

    def _pause(self, message: str) -> None:
        self._ask(message)

    # -- main menu -----------------------------------------------------

    def _print_main_menu(self) -> None:
        self._say("=" * 37)
        self._say("   • MENÚ PRINCIPAL - MI NEGOCIO •   ")
        self._say("=" * 37)
        self._say("   Seleccione una opción del menú.")
        self._say("─" * 37)
        self._say("1. Ingresar Marcas")
        self._say("2. Ingresar Productos")
        self._say("3. Ingresar Formas de Pago")
        self._say("4. Ingresar Ventas")
        self._say("5. Reportes")
        self._say("─" * 37)
        self._say("0. SALIR")
        self._say()

    def run(self) -> None:
        """Show the main menu until the user leaves or input runs out."""
        try:
            self._main_loop()
        except EOFError:
            self._say()

    def _main_loop(self) -> None:
        while True:
            self._clear()
            self._print_main_menu()
            option = self._ask_int("Seleccione una opción: ")
            while option not in (0, 1, 2, 3, 4, 5):
                self._write(_INVALID_OPTION)
                option = self._ask_int("")
            if option == 0:
                self._clear()
                self._say()
                self._say("Gracias por utilizar Mi Negocio. Hasta pronto!")
                return
            if option == 1:
                self.load_brands()
                self._pause("\nToca ENTER para ir al menú principal.")
            elif option == 2:
                self._clear()
                self.load_products()
                self._pause("\nToca ENTER para ir al menú principal.")
            elif option == 3:
                self.load_payment_methods()
                self._pause("\nToca ENTER para volver al menú principal.")
            elif option == 4:
                self._clear()
                self.load_sales()
                self._pause("\nToca ENTER para volver al menú principal.")
            else:
                self._clear()
                self.reports_menu()

    # -- lot 1: brands -------------------------------------------------

    def load_brands(self) -> None:
        """Ask for the ten brands, re-asking until each entry is valid."""
        brands: list[Brand] = []
        for number in range(1, MAX_BRANDS + 1):
            self._clear()
            self._say("─" * 50)
            self._say("             CARGA DE MARCAS - LOTE 1               ")
            self._say("─" * 50)
            self._say(
                f"A continuación, ingrese los datos para la marca #{number}."
            )
            while True:
                code = self._ask_int(
                    "- Código de marca (número entero del 1 al 10): "
                )
                if code is not None and 1 <= code <= MAX_BRANDS:
                    break
                self._say()
                self._say("El código ingresado no es válido. Intente nuevamente.")
            while True:
                name = self._ask("- Nombre de marca (no puede estar vacío): ")
                self._say()
                try:
                    brand = validate_brand(code, name)
                except ValidationError:
                    self._say("El nombre ingresado no es válido. Intente nuevamente.")
                    continue
                break
            brands.append(brand)

        self.store.set_brands(brands)
        self._clear()
        self._say(
            "Carga del lote 1 completada con éxito. "
            "A continuación se muestra el listado:"
        )
        self._say("─" * 77)
        for brand in brands:
            separator = "   |   " if brand.code <= 9 else "  |   "
            self._say(
                f"Código de marca: {brand.code}{separator}"
                f"Nombre de marca: {brand.name}"
            )

    # -- lot 2: products -----------------------------------------------

    def load_products(self) -> None:
        """Ask for the twenty products; the first invalid answer stops the load."""
        self._say("─" * 49)
        self._say("          CARGA DE PRODUCTOS - LOTE 2           ")
        self._say("─" * 49)
        if not self.store.brands_loaded:
            self._say()
            self._say(
                "ERROR: Debe cargar las marcas antes de iniciar la carga de productos."
            )
            return

        loaded: list[Product] = []
        known_brands = set(self.store.brand_codes)

        def interrupt(message: str) -> None:
            self._say(message)
            self.store.set_products(loaded)

        for number in range(1, MAX_PRODUCTS + 1):
            self._say()
            self._say(f"Producto #{number} :")
            code = self._ask_int("Codigo de producto (3 dígitos, no consecutivos): ")
            if code is None or not 100 <= code <= 999:
                return interrupt("Codigo inválido. Carga interrumpida.")
            if is_consecutive_code(code):
                return interrupt(
                    "El código no puede ser consecutivo. Carga interrumpida."
                )
            name = self._ask("Nombre producto: ")
            if not name:
                return interrupt("El nombre no puede estar vacio. Carga interrumpida.")
            sale_price = self._ask_float("Precio de venta: ")
            if not sale_price:
                return interrupt("Precio de venta necesario. Carga interrumpida.")
            purchase_price = self._ask_float("Precio de compra: ")
            if not purchase_price:
                return interrupt("Precio de compra necesario. Carga interrumpida.")
            stock = self._ask_int("Stock disponible: ")
            if not stock:
                return interrupt("Stock disponible necesario. Carga interrumpida.")
            brand_code = self._ask_int("Código de marca: ")
            if not brand_code:
                return interrupt("Código de marca requerido. Carga interrumpida.")
            if brand_code not in known_brands:
                return interrupt(
                    "Código de marca no encontrado en el lote de marcas. "
                    "Carga interrumpida."
                )
            loaded.append(
                Product(code, name, sale_price, purchase_price, stock, brand_code)
            )

        self.store.set_products(loaded)
        self._say(
            "Carga del lote 2 completada con éxito. "
            "A continuación se muestra el listado de productos:"
        )
        self._say()
        self._write(format_product_table(loaded))
        self._say("Carga de productos completada.")

    # -- lot 3: payment methods ----------------------------------------

    def load_payment_methods(self) -> None:
        """Ask for the five payment methods and show the resulting table."""
        methods: list[PaymentMethod] = []
        for number in range(1, PAYMENT_METHOD_COUNT + 1):
            self._clear()
            self._say("─" * 32)
            self._say(" CARGA FORMAS DE PAGO - LOTE 3 ")
            self._say("─" * 32)
            self._say("       Códigos válidos:")
            self._say("─" * 32)
            for code, label in PAYMENT_CODE_LABELS.items():
                self._say(f"{code} - ({label})")
            self._say("─" * 32)

            taken = [method.code for method in methods]
            while True:
                raw = self._ask(
                    f"Ingrese el código para la forma de pago # {number}: "
                ).strip()
                code = normalize_payment_code(raw)
                if code in PAYMENT_CODE_LABELS and code not in taken:
                    break
                self._say(
                    "El código ingresado está repetido o es inválido. "
                    "Por favor, intente nuevamente: "
                )
            name = self._ask("Ingrese nombre de la forma de pago: ")
            percentage = None
            while percentage is None:
                percentage = self._ask_int(
                    "Ingrese porcentaje (número entero positivo para interés, "
                    "negativo para descuento): "
                )
            methods.append(validate_payment_method(code, name, percentage, taken))
            self._say()

        self.store.set_payment_methods(methods)
        self._clear()
        self._write(format_payment_methods_table(methods))

    # -- lot 4: sales --------------------------------------------------

    def load_sales(self) -> None:
        """Record sales until purchase number 0; invalid sales are skipped."""
        self._say("─" * 45)
        self._say("         CARGA DE VENTAS - LOTE 4            ")
        self._say("─" * 45)
        try:
            self.store.check_ready_for_sales()
        except LoadOrderError as error:
            self._say()
            self._say(" ERROR: Para cargar ventas primero debe cargar:")
            for lot in error.missing:
                self._say(_LOT_LINES[lot])
            return

        while True:
            purchase = self._ask_int("\nIngrese Nro de Compra (0 para finalizar): ")
            if purchase == 0:
                self._say()
                self._say("Carga de ventas finalizada.")
                return
            if purchase is None:
                continue

            product_code = self._ask_int("Ingrese Código de Producto: ")
            if product_code is None or not self.store.has_product(product_code):
                self._say("Código de producto inválido. Venta no registrada.")
                continue
            payment_code = self._ask("Ingrese Código de Forma de Pago: ").strip()
            if not self.store.has_payment_method(payment_code):
                self._say("Código de forma de pago inválido. Venta no registrada.")
                continue
            quantity = self._ask_int("Ingrese Cantidad Vendida: ")
            if quantity is None or quantity <= 0:
                self._say(
                    "La cantidad vendida debe ser mayor a 0. Venta no registrada."
                )
                continue
            client = self._ask_int("Ingrese Código de Cliente (1 a 50): ")
            if client is None or not 1 <= client <= 50:
                self._say("Código de cliente inválido. Venta no registrada.")
                continue
            day = self._ask_int("Ingrese Día de Venta (1 a 30): ")
            if day is None or not 1 <= day <= 30:
                self._say("Dia inválido. Venta no registrada.")
                continue

            self.store.record_sale(product_code, payment_code, quantity, client, day)

    # -- reports -------------------------------------------------------

    def _print_reports_menu(self) -> None:
        self._say("─" * 37)
        self._say("          MENÚ DE REPORTES          ")
        self._say("─" * 37)
        self._say("  Seleccione una opción de reporte.")
        self._say("─" * 37)
        self._say("1. Recaudación por producto")
        self._say("2. Porcentaje de ventas por forma de pago")
        self._say("3. Ventas por marca y forma de pago")
        self._say("4. Productos sin ventas")
        self._say("5. Top 10 clientes + sorteo de cupones")
        self._say("─" * 37)
        self._say("0. Volver al MENÚ PRINCIPAL.")
        self._say()

    def _report_text(self, option: int) -> str:
        if option == 1:
            try:
                return format_revenue_report(self.store)
            except LoadOrderError:
                return "ERROR: primero debe cargar los productos y las ventas.\n"
        if option == 2:
            return format_payment_share_report(self.store)
        if option == 3:
            try:
                return format_brand_payment_report(self.store)
            except LoadOrderError:
                return "ERROR: faltan cargar marcas o formas de pago.\n"
        if option == 4:
            return format_products_without_sales(self.store)
        return format_top_clients_report(self.store, self._rng)

    def reports_menu(self) -> None:
        """Show reports until the user goes back to the main menu."""
        while True:
            self._print_reports_menu()
            option = self._ask_int("Seleccione una opción: ")
            if option == 0:
                return
            if option not in (1, 2, 3, 4, 5):
                self._say(_INVALID_OPTION)
                continue
            self._clear()
            self._write(self._report_text(option))
            self._say()
            self._say("Toca ENTER para volver al menú de reportes.")
            self._pause("")
            self._clear()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive shop menu."""
    parser = argparse.ArgumentParser(
        prog="minegocio",
        description="Load brands, products, payment methods and sales; read reports.",
    )
    parser.parse_args(argv)
    App(Store()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
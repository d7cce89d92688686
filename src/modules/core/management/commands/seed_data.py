from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("Monitor Curvo de 49 pulgadas", Decimal("300.00"), True),
    ("Teclado Mecánico", Decimal("89.90"), True),
    ("Mouse Inalámbrico", Decimal("25.50"), True),
    ("Audífonos con Cancelación de Ruido", Decimal("199.99"), True),
    ("Laptop 14 pulgadas", Decimal("1200.00"), False),
    ("Silla Ergonómica", Decimal("349.00"), True),
]


class Command(BaseCommand):
    help = "Seed database with sample products."

    def handle(self, *args, **options):
        self.stdout.write("Creating products...")
        created = 0
        for name, price, availability in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "availability": availability},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created} created, "
                f"{len(CATALOG) - created} already present"
            )
        )

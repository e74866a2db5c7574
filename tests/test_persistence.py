"""Tests para guardado y carga del inventario."""

from __future__ import annotations

import json
import tempfile
import threading
import unittest
from pathlib import Path

from servidor.domain.models import InventorySnapshot, Producto
from servidor.services.inventory_store import InventoryStore
from servidor.services.persistence import (
    InventoryPersistence,
    decode_inventory,
    encode_inventory,
)
from shared.errors import PersistenceError, ValidationError
from shared.inventory_schema import FORMAT_NAME, FORMAT_VERSION


class InventoryPersistenceTests(unittest.TestCase):
    """Valida round-trip, arranque vacio y errores de E/S."""

    def test_round_trip_from_empty_to_full(self) -> None:
        """Guardar y cargar debe reproducir orden, cantidad y campos."""
        productos = [
            Producto(1, "Widget", 6, 2.5),
            Producto(2, "Gadget", 0, 9.99),
            Producto(2, "Ñandú ración", 3, 0.1 + 0.2),
            Producto(-4, "", 7, 1e-7),
        ]
        for count in range(len(productos) + 1):
            with self.subTest(count=count), tempfile.TemporaryDirectory() as temp_dir:
                persistence = InventoryPersistence(Path(temp_dir) / "inventario.json")
                store = InventoryStore(len(productos), productos[:count])

                persistence.save(store)
                loaded = persistence.load(len(productos))

                self.assertEqual(loaded.list_all(), productos[:count])
                self.assertEqual(len(loaded), count)
                self.assertEqual(loaded.capacidad, len(productos))

    def test_end_to_end_scenario_round_trip(self) -> None:
        """El escenario de referencia debe sobrevivir save/load."""
        with tempfile.TemporaryDirectory() as temp_dir:
            persistence = InventoryPersistence(Path(temp_dir) / "inventario.json")
            store = InventoryStore(2)
            store.add_product(1, "Widget", 10, 2.5)
            store.add_product(2, "Gadget", 5, 9.99)
            store.add_product(3, "X", 1, 1.0)
            store.place_order(1, 4)
            store.update_stock(2, 0)

            persistence.save(store)
            loaded = persistence.load(2)

        self.assertEqual(
            loaded.list_all(),
            [Producto(1, "Widget", 6, 2.5), Producto(2, "Gadget", 0, 9.99)],
        )

    def test_saved_document_uses_versioned_schema(self) -> None:
        """El archivo debe incluir formato, version y conteo de productos."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "data" / "inventario.json"
            store = InventoryStore(5, [Producto(1, "Widget", 6, 2.5)])

            saved = InventoryPersistence(path).save(store)
            data = json.loads(path.read_text(encoding="utf-8"))
            leftovers = list(path.parent.glob("*.tmp"))

        self.assertEqual(saved.path, path)
        self.assertEqual(saved.cantidad_productos, 1)
        self.assertEqual(data["formato"], FORMAT_NAME)
        self.assertEqual(data["version"], FORMAT_VERSION)
        self.assertEqual(data["capacidad"], 5)
        self.assertEqual(data["cantidad_productos"], 1)
        self.assertEqual(
            data["productos"],
            [{"id": 1, "nombre": "Widget", "cantidad": 6, "precio": 2.5}],
        )
        self.assertEqual(leftovers, [])

    def test_save_overwrites_previous_contents(self) -> None:
        """Un segundo guardado debe reemplazar el archivo completo."""
        with tempfile.TemporaryDirectory() as temp_dir:
            persistence = InventoryPersistence(Path(temp_dir) / "inventario.json")
            store = InventoryStore(2, [Producto(1, "A", 1, 1.0), Producto(2, "B", 2, 2.0)])
            persistence.save(store)

            persistence.save(InventoryStore(2))
            loaded = persistence.load(2)

        self.assertEqual(loaded.list_all(), [])

    def test_load_missing_file_returns_empty_store(self) -> None:
        """Sin archivo previo debe iniciar vacio con la capacidad pedida."""
        with tempfile.TemporaryDirectory() as temp_dir:
            persistence = InventoryPersistence(Path(temp_dir) / "no_existe.json")

            with self.assertLogs("servidor.services.persistence", level="INFO") as logs:
                store = persistence.load(7)

        self.assertEqual(len(store), 0)
        self.assertEqual(store.capacidad, 7)
        self.assertIn("Inicio vacio", "\n".join(logs.output))

    def test_load_corrupt_files_returns_empty_store(self) -> None:
        """Archivos ilegibles o con esquema invalido no deben propagar errores."""
        contents = {
            "json_invalido": "{no es json",
            "lista": "[]",
            "otro_formato": json.dumps({"formato": "otro", "version": 1}),
            "otra_version": self._document(version=2),
            "conteo_distinto": self._document(count=3),
            "precio_texto": self._document(precio="2.5"),
            "cantidad_bool": self._document(cantidad=True),
            "sin_nombre": self._document(drop="nombre"),
            "entero_gigante": (
                f'{{"formato": "{FORMAT_NAME}", "version": {FORMAT_VERSION}, '
                f'"cantidad_productos": {"9" * 5000}, "productos": []}}'
            ),
            "anidado_profundo": "[" * 200000 + "]" * 200000,
        }
        for label, content in contents.items():
            with self.subTest(label=label), tempfile.TemporaryDirectory() as temp_dir:
                path = Path(temp_dir) / "inventario.json"
                path.write_text(content, encoding="utf-8")

                with self.assertLogs("servidor.services.persistence", level="WARNING"):
                    store = InventoryPersistence(path).load(4)

                self.assertEqual(store.list_all(), [])
                self.assertEqual(store.capacidad, 4)

    def test_load_binary_garbage_returns_empty_store(self) -> None:
        """Bytes que no son UTF-8 deben tratarse como inicio vacio."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "inventario.json"
            path.write_bytes(b"\xac\xed\x00\x05ur\x00")

            store = InventoryPersistence(path).load(3)

        self.assertEqual(len(store), 0)

    def test_load_with_smaller_capacity_keeps_saved_products(self) -> None:
        """Si lo guardado supera la capacidad, se amplia para no perder datos."""
        with tempfile.TemporaryDirectory() as temp_dir:
            persistence = InventoryPersistence(Path(temp_dir) / "inventario.json")
            productos = [Producto(n, f"P{n}", n, float(n)) for n in range(1, 4)]
            persistence.save(InventoryStore(3, productos))

            with self.assertLogs("servidor.services.persistence", level="WARNING"):
                loaded = persistence.load(2)

        self.assertEqual(loaded.capacidad, 3)
        self.assertEqual(loaded.list_all(), productos)

    def test_save_io_error_raises_persistence_error_without_rollback(self) -> None:
        """Un fallo de E/S debe levantar PersistenceError y dejar la memoria intacta."""
        with tempfile.TemporaryDirectory() as temp_dir:
            blocker = Path(temp_dir) / "archivo"
            blocker.write_text("no soy un directorio", encoding="utf-8")
            persistence = InventoryPersistence(blocker / "inventario.json")
            store = InventoryStore(2, [Producto(1, "Widget", 6, 2.5)])

            with self.assertRaises(PersistenceError):
                persistence.save(store)

        self.assertEqual(store.list_all(), [Producto(1, "Widget", 6, 2.5)])

    def test_save_unencodable_name_raises_persistence_error(self) -> None:
        """Un nombre que no se codifica en UTF-8 no debe dejar escapar UnicodeEncodeError."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "inventario.json"
            persistence = InventoryPersistence(path)
            persistence.save(InventoryStore(2, [Producto(1, "Widget", 6, 2.5)]))

            with self.assertLogs("servidor.services.persistence", level="ERROR"):
                with self.assertRaises(PersistenceError) as ctx:
                    persistence.save(InventoryStore(2, [Producto(2, "malo\ud800", 1, 1.0)]))

            loaded = persistence.load(2)
            leftovers = list(path.parent.glob("*.tmp"))

        self.assertIsInstance(ctx.exception.__cause__, UnicodeEncodeError)
        self.assertEqual(loaded.list_all(), [Producto(1, "Widget", 6, 2.5)])
        self.assertEqual(leftovers, [])

    def test_encode_decode_are_inverse(self) -> None:
        """decode_inventory debe reconstruir lo que encode_inventory produce."""
        productos = (Producto(1, "Widget", 6, 2.5), Producto(9, "Gadget", 0, 9.99))
        document = encode_inventory(InventorySnapshot(capacidad=4, productos=productos))

        self.assertEqual(decode_inventory(document), list(productos))

    def test_decode_rejects_non_object(self) -> None:
        """decode_inventory debe levantar ValidationError ante documentos invalidos."""
        with self.assertRaises(ValidationError):
            decode_inventory([1, 2, 3])

    def test_concurrent_saves_never_observe_torn_state(self) -> None:
        """Cada archivo guardado durante pedidos concurrentes debe ser valido y monotono."""
        with tempfile.TemporaryDirectory() as temp_dir:
            persistence = InventoryPersistence(Path(temp_dir) / "inventario.json")
            store = InventoryStore(2)
            store.add_product(1, "Widget", 400, 2.5)
            store.add_product(2, "Gadget", 400, 9.99)
            done = threading.Event()
            observed: list[tuple[int, int]] = []

            def orders() -> None:
                for _ in range(400):
                    store.place_order(1, 1)
                    store.place_order(2, 1)
                done.set()

            def saver() -> None:
                while not done.is_set():
                    persistence.save(store)
                    loaded = persistence.load(2).list_all()
                    observed.append((loaded[0].cantidad, loaded[1].cantidad))

            threads = [threading.Thread(target=orders), threading.Thread(target=saver)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

            persistence.save(store)
            final = persistence.load(2).list_all()

        for first, second in observed:
            # Cada pedido descuenta primero el producto 1 y luego el 2.
            self.assertIn(second - first, (0, 1))
        firsts = [first for first, _ in observed]
        self.assertEqual(firsts, sorted(firsts, reverse=True))
        self.assertEqual([p.cantidad for p in final], [0, 0])

    @staticmethod
    def _document(
        version: object = FORMAT_VERSION,
        count: object = 1,
        precio: object = 2.5,
        cantidad: object = 6,
        drop: str | None = None,
    ) -> str:
        record = {"id": 1, "nombre": "Widget", "cantidad": cantidad, "precio": precio}
        if drop is not None:
            record.pop(drop)
        return json.dumps(
            {
                "formato": FORMAT_NAME,
                "version": version,
                "capacidad": 4,
                "cantidad_productos": count,
                "productos": [record],
            }
        )


if __name__ == "__main__":
    unittest.main()

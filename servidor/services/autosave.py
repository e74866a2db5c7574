"""Guardado periodico del inventario en segundo plano."""

from __future__ import annotations

import logging
import threading

from parametros import AUTOSAVE_INTERVAL_SEC, STOP_TIMEOUT_SEC
from servidor.services.inventory_store import InventoryStore
from servidor.services.persistence import InventoryPersistence
from shared.errors import PersistenceError, ServiceError

LOGGER = logging.getLogger(__name__)


class AutoSaveWorker:
    """Guarda el inventario cada `interval` segundos hasta que se detiene.

    El hilo es daemon y espera sobre un Event, de modo que `stop()` lo
    despierta de inmediato. El cierre de la aplicacion debe llamar a `stop()`
    y luego hacer un guardado sincronico propio.
    """

    def __init__(
        self,
        store: InventoryStore,
        persistence: InventoryPersistence,
        interval: float = AUTOSAVE_INTERVAL_SEC,
    ) -> None:
        if interval <= 0:
            raise ServiceError(f"El intervalo de autoguardado debe ser positivo: {interval}")

        self._store = store
        self._persistence = persistence
        self._interval = interval
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._loop, name="autosave", daemon=True)
        self._save_count = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._thread.is_alive()

    @property
    def save_count(self) -> int:
        """Cantidad de guardados periodicos exitosos."""
        return self._save_count

    def start(self) -> None:
        """Inicia el hilo de autoguardado."""
        if self._thread.ident is not None:
            raise ServiceError("El autoguardado ya fue iniciado.")
        self._thread.start()
        LOGGER.info("Autoguardado iniciado cada %.1f s.", self._interval)

    def stop(self, timeout: float | None = STOP_TIMEOUT_SEC) -> None:
        """Senala la detencion y espera a que el hilo termine."""
        self._stop.set()
        if self._thread.ident is None:
            return

        self._thread.join(timeout)
        if self._thread.is_alive():
            LOGGER.warning("El autoguardado no termino dentro de %s s.", timeout)
        else:
            LOGGER.info("Autoguardado detenido.")

    def _loop(self) -> None:
        while not self._stop.wait(self._interval):
            self._save_once()

    def _save_once(self) -> None:
        try:
            self._persistence.save(self._store)
        except PersistenceError:
            LOGGER.exception("Fallo el autoguardado; se reintentara en el siguiente ciclo.")
            return
        except Exception:
            LOGGER.exception("Error inesperado en el autoguardado; el hilo sigue activo.")
            return
        self._save_count += 1

"""Application factory for the DiceBox FastAPI app.

This module exposes `build_registry(config)`, the composition root that
registers every application service, and `create_app(config) -> FastAPI`
which wraps the registry in an HTTP app. Nothing happens at import time so
tests can construct isolated apps.

    from dicebox_lib.main import create_app, Config
    app = create_app(Config())
"""
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from dicebox_lib.config.config import load_app_config
from dicebox_lib.logging_config import configure_logging
from dicebox_lib.services import ServiceRegistry


@dataclass
class Config:
    data_dir: str = "data"
    config_file: str = "config/dicebox_config.yml"
    strategy_id: Optional[str] = None
    # Leave root logging untouched when False (tests, embedding)
    setup_logging: bool = True

    @property
    def config_path(self) -> Path:
        return Path(self.data_dir) / self.config_file


def build_registry(config: Config) -> ServiceRegistry:
    """Register all application services; nothing is constructed yet
    apart from the loaded configuration."""
    from dicebox_lib.dice import DiceStore, DEFAULT_STRATEGY, create_strategy
    from dicebox_lib.messaging import MessageBus
    from dicebox_lib.network import LoopbackNetwork

    registry = ServiceRegistry()
    registry.register_instance("config", load_app_config(config.config_path))
    registry.register("local_player", lambda r: dict(r.get("config")["local_player"]))
    registry.register("message_bus", lambda r: MessageBus())
    registry.register("network", lambda r: LoopbackNetwork(
        r.get("message_bus"),
        peer_id=r.get("local_player")["id"],
    ))

    def _dice_store(r: ServiceRegistry) -> DiceStore:
        store = DiceStore()
        store.set_config(r.get("config")["dice"])
        return store

    registry.register("dice_store", _dice_store)

    def _strategy(r: ServiceRegistry):
        local_player = r.get("local_player")
        strategy = create_strategy(config.strategy_id or DEFAULT_STRATEGY, {
            "state": r.get("dice_store"),
            "network": r.get("network"),
            "local_player": local_player,
        })

        # Loopback delivers our own broadcasts too; only apply other peers' rolls.
        def _on_roll(payload, ctx):
            if ctx.get("from_peer_id") != local_player["id"]:
                strategy.handle_message("dice:roll", payload, ctx.get("from_peer_id"))

        r.get("network").on_message("dice:roll", _on_roll)
        strategy.activate()
        return strategy

    registry.register("strategy", _strategy)
    return registry


def create_app(config: Config) -> FastAPI:
    """Create and return a configured FastAPI application."""
    if config.setup_logging:
        logger = configure_logging(config.config_path)
    else:
        logger = logging.getLogger(__name__)

    registry = build_registry(config)
    logger.info("Registered services: %s", ", ".join(registry.keys()))

    app = FastAPI(title="DiceBox Server")
    # Request handlers resolve services from this registry only.
    app.state.container = registry

    from dicebox_lib.server.api import router as server_router
    from dicebox_lib.dice.api import router as dice_router

    app.include_router(server_router, prefix='/api')
    app.include_router(dice_router, prefix='/api')

    return app

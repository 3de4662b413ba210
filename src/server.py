"""Protean Engine runner for the storefront.

In production, event processing is asynchronous: the Engine picks up
committed events and runs the low-stock and order-confirmation handlers.

Usage:
    python src/server.py
"""

from protean.server.engine import Engine

from ordering.utils.logging import configure_logging


def main():
    from ordering.domain import ordering

    configure_logging()
    ordering.init()
    Engine(ordering).run()


if __name__ == "__main__":
    main()

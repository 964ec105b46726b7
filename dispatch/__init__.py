"""Order Dispatch: assigns customer orders to restaurants."""

__version__ = "0.1.0"

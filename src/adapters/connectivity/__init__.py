"""Connectivity adapters - Network reachability monitoring."""

from .monitor import ConnectivityMonitor, HealthCheckProbe

__all__ = ["ConnectivityMonitor", "HealthCheckProbe"]

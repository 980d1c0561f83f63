from .settings import DashboardConfig

__all__ = ['DashboardConfig']

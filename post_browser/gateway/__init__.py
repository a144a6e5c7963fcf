"""Remote data gateway for employees, posts and comments."""

from .client import FetchPolicy, RemoteDataGateway

__all__ = ["FetchPolicy", "RemoteDataGateway"]

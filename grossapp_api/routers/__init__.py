from . import admins, logins, products

__all__ = ["admins", "logins", "products"]

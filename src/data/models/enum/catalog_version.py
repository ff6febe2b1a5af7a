import enum


class CatalogVersion(enum.Enum):
    STAGED = "STAGED"
    ONLINE = "ONLINE"

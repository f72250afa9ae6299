from fastapi import APIRouter

from app.types.factory import Factory


class Module:
    def __init__(
        self,
        root: str,
        tag: str,
        factory: type[Factory] | None,
        router: APIRouter | None = None,
    ):
        """
        Initialize a new Module object.
        :param root: the root of the module, the resource path its endpoints are served under
        :param tag: the tag of the module, used by FastAPI
        :param factory: a factory to use to create demo data for the module (development purpose)
        :param router: an optional custom APIRouter
        """
        self.root = root
        self.router = router or APIRouter(tags=[tag])
        self.factory = factory

import logging

pkg_root = logging.getLogger("sf_record_ops")


def getLogger(name: str | None = None):
    if not name:
        return pkg_root
    return pkg_root.getChild(name)

"""
Mode Selector - Dev server detection.

Probes the dev server root once. Any HTTP answer (error statuses included)
means a dev server is running; only a transport failure means the built
assets should be served.
"""

from typing import Optional
import logging
import urllib.error
import urllib.request

logger = logging.getLogger("vitebridge.mode")


def detect_dev_server(dev_url: str, timeout: Optional[float] = None) -> bool:
    """
    Check whether a dev server answers at ``dev_url``.

    Args:
        dev_url: Dev server root URL
        timeout: Socket timeout in seconds (None keeps the global default)

    Returns:
        True if the server answered, False on connection failure
    """
    kwargs = {} if timeout is None else {"timeout": timeout}
    # Dev servers are local; never route the probe through a proxy
    opener = urllib.request.build_opener(urllib.request.ProxyHandler({}))

    try:
        with opener.open(dev_url, **kwargs):
            pass
    except urllib.error.HTTPError as e:
        # Status errors still come from a live server
        e.close()
        logger.info(f"Dev server at {dev_url} answered {e.code}, using dev mode")
        return True
    except (urllib.error.URLError, OSError) as e:
        logger.info(f"Dev server at {dev_url} unreachable ({e}), using built assets")
        return False

    logger.info(f"Dev server at {dev_url} reachable, using dev mode")
    return True

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO", *, http_bodies: bool = False) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

    # httpx logs full request urls at INFO, and ours carry passwords and tokens
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger("homemoney_client.http").setLevel(
        logging.DEBUG if http_bodies else logging.WARNING
    )

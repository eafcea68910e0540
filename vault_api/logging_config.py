import logging

from vault_api.config import Settings


def configure_logging(config: Settings) -> None:
    root = logging.getLogger()
    root.setLevel(config.log_level.upper())

    console = logging.StreamHandler()
    console.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )

    root.handlers.clear()
    root.addHandler(console)

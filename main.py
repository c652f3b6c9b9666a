"""Point d'entrée de la visionneuse d'images."""

from __future__ import annotations

import sys

from urlview.config import ConfigError, load_config
from urlview.logger import setup_logging
from urlview.state import ViewState
from urlview.ui.app import MainWindow


def main() -> int:
    """Charge la configuration puis lance l'interface Tkinter."""
    try:
        config = load_config()
    except ConfigError as exc:
        print(f"Configuration invalide : {exc}", file=sys.stderr)
        return 1

    logger = setup_logging(config.log_level)
    logger.info("Démarrage de %s", config.title)

    state = ViewState()
    app = MainWindow(config=config, state=state)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

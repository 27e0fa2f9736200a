"""Точка входа в приложение."""
import logging

from amoled_maker.app import AmoledMakerApp
from amoled_maker.config import AppConfig
from amoled_maker.logging_config import setup_logging


def main() -> None:
    """Настраивает журнал, создаёт и запускает главное окно приложения."""
    config = AppConfig()
    setup_logging(config.log_dir, config.log_level)
    logging.getLogger(__name__).info("=== Запуск %s ===", config.title)

    app = AmoledMakerApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()

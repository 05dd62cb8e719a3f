from env_vars_config import EnvConfig
from env_vars_config.logger import configure_logging


class AppConfig(EnvConfig):
    SERVER_ADDRESS: str = "0.0.0.0:8080"
    WORKERS_COUNT: int = 32


def main():
    configure_logging()

    print("server address:", AppConfig.SERVER_ADDRESS)
    print("workers count:", AppConfig.WORKERS_COUNT)


if __name__ == "__main__":
    main()

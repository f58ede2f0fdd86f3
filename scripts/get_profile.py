import argparse
import json
import logging

from feedly_cloud.api_client import FeedlyClient
from feedly_cloud.config import (
    EnvironmentClientConfigProvider,
    FileClientConfigProvider,
    setup_logging,
)
from feedly_cloud.exceptions import FeedlyError

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description=(
            "Print the Feedly profile of the token owner. "
            "Set FEEDLY_BASE_URL=https://sandbox7.feedly.com to use the sandbox."
        )
    )
    parser.add_argument(
        "--config", help="YAML config file (default: read FEEDLY_* variables)"
    )
    parser.add_argument(
        "--log-dir", default="logs", help="Directory for log files (default: logs)"
    )
    args = parser.parse_args()

    setup_logging(log_dir=args.log_dir)

    try:
        if args.config:
            config = FileClientConfigProvider(args.config).get_config()
        else:
            config = EnvironmentClientConfigProvider().get_config()
    except ValueError as e:
        logger.error(str(e))
        raise SystemExit(1)

    client = FeedlyClient(config)
    try:
        profile = client.get_profile()
    except FeedlyError as e:
        logger.error(f"Failed to fetch profile: {str(e)}")
        raise SystemExit(1)
    finally:
        client.close()

    print(json.dumps(profile.to_dict(), indent=3))


if __name__ == "__main__":
    main()

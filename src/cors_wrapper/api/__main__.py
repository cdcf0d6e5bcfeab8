#!/usr/bin/env python3
import sys
import argparse


def main():
    parser = argparse.ArgumentParser(description='cors-wrapper demo server', prog='python -m cors_wrapper.api')

    parser.add_argument('--host',
                      type=str,
                      default='127.0.0.1',
                      help='Server host address')

    parser.add_argument('--port',
                      type=int,
                      default=8000,
                      help='Server port')

    parser.add_argument('--config',
                      type=str,
                      default=None,
                      help='YAML file with a cors: section')

    parser.add_argument('--log-level',
                      type=str,
                      default='info',
                      choices=['debug', 'info', 'warning', 'error'],
                      help='Log level')

    parser.add_argument('--log-file',
                      type=str,
                      default=None,
                      help='Also write logs to this file')

    args = parser.parse_args()

    import uvicorn
    from loguru import logger
    from ..utils.logger import setup_logger
    from ..exceptions import ConfigurationError
    from .main import create_app

    setup_logger(args.log_level, log_file=args.log_file)

    try:
        app = create_app(config_file=args.config)
    except ConfigurationError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)

    logger.info(f"Address: http://{args.host}:{args.port}")

    try:
        uvicorn.run(
            app,
            host=args.host,
            port=args.port,
            log_level=args.log_level
        )
    except KeyboardInterrupt:
        logger.info("Server has stopped")


if __name__ == '__main__':
    main()

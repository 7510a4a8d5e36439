import logging
import sys


class LoggerFactory:
    @staticmethod
    def get_logger(name="atuapj", level=None):
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)

        if not logger.handlers:
            stream_handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter(
                '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
            )
            stream_handler.setFormatter(formatter)
            logger.addHandler(stream_handler)
            if not level and logger.level == logging.NOTSET:
                logger.setLevel(logging.INFO)

        return logger

import logging


def create_stream_logger(name='mytrigger', level=logging.INFO):
    """
    create a logger with a single stream handler
    - name: name of logger, defaults to package logger so all `mytrigger` modules propagate to it
    - level: level of stream handler
    """

    # create logger according to active name
    my_logger = logging.getLogger(name)

    # set level to DEBUG so handler decides what is shown
    my_logger.setLevel(logging.DEBUG)

    # delete any existing handlers (in case of this code being run twice)
    for h in my_logger.handlers:
        h.close()
    my_logger.handlers.clear()

    log_formatter = logging.Formatter(
        fmt='{asctime} - {name} - {levelname:8} - {message}',
        datefmt='%d-%b-%y %H:%M:%S',
        style='{'
    )

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(log_formatter)
    stream_handler.setLevel(level)
    my_logger.addHandler(stream_handler)

    return my_logger

import logging

internal_logger = logging.getLogger("httpcookie.internal")
jar_logger = logging.getLogger("httpcookie.jar")

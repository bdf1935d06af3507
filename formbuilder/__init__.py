from formbuilder.utils.log_handler import get_logger

log = get_logger("formbuilder_api")
log.info("starting up app")

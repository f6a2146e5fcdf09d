import argparse
import json
import sys

from fieldscan import logger
from fieldscan.api import parse
from fieldscan.config import create_config, ConfigError
from fieldscan.errors import DoesNotMatch, SearchExhausted, TemplateError
from fieldscan.log import LOG_DISPATCHER, config_logger


EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def parse_args(argv=None, config=None):
    config = config or create_config()
    parser = argparse.ArgumentParser(prog='fieldscan', description='Extract named fields from strings.')
    parser.add_argument('-v', '--verbose', action='count', default=config['VERBOSE'], help='increase verbosity')
    parser.add_argument('--logfile', help='write log to file')
    parser.add_argument(
        '--max-steps', type=int, default=config['MAX_STEPS'],
        help='give up after this many candidate trials',
    )
    parser.add_argument('template', help='template such as "{a:i}-{b:i}"')
    parser.add_argument('inputs', nargs='+', help='strings to match')

    return parser.parse_args(argv)


def run(option) -> int:
    logger.info('app.start', template=option.template)

    try:
        pattern = parse(option.template)
    except TemplateError as exc:
        logger.error('app.template_error', error=type(exc).__name__, text=exc.text)
        print('fieldscan: %s: %r' % (type(exc).__name__, exc.text), file=sys.stderr)
        return EXIT_ERROR

    status = EXIT_OK
    for target in option.inputs:
        try:
            result = pattern.match_all(target, max_steps=option.max_steps)
        except DoesNotMatch:
            logger.info('app.no_match', input=target)
            result = None
            status = EXIT_NO_MATCH
        except SearchExhausted as exc:
            print('fieldscan: search exhausted after %d steps' % exc.steps, file=sys.stderr)
            return EXIT_ERROR
        print(json.dumps(result, sort_keys=True))

    logger.info('app.finish', status=status)
    return status


def main(argv=None):
    try:
        config = create_config()
    except ConfigError as exc:
        print('fieldscan: invalid setting %s=%r' % exc.args, file=sys.stderr)
        return EXIT_ERROR

    option = parse_args(argv, config=config)
    writer = config_logger(verbose=option.verbose, logfile=option.logfile)
    try:
        return run(option)
    finally:
        if writer is not None:
            LOG_DISPATCHER.remove_handler(writer)
            writer.close()


if __name__ == '__main__':
    sys.exit(main())

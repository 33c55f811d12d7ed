"""Main CLI entry point for regtag."""

import argparse
import sys
import logging

from .auth.credentials import CredentialResolver, DockerCredentialResolver, StaticCredentialResolver, parse_creds
from .config.settings import Config, LOG_LEVELS
from .errors import ParseError, RegtagError, error_context
from .models.reference import Reference, parse_reference
from .operations.add_tag import AddTagOperation
from .operations.list_equivalents import ListEquivalentsOperation
from .registry.client import RegistryClient
from .utils.logger import setup_logging
from .utils.output import print_json_output, print_table


logger = logging.getLogger(__name__)


def handle_list(args, reference: Reference, client: RegistryClient, config: Config):
    """Handle list mode: print the tags sharing the image of the given tag."""
    list_op = ListEquivalentsOperation(client, progress=config.progress and not args.no_progress)

    result = list_op.find_equivalents(reference)

    if args.json:
        print_json_output({
            "Image": args.image,
            "Digest": result['digest'],
            "Tags": [{"Tag": tag, "Digest": digest} for tag, digest in result['rows']]
        }, sys.stdout)
    else:
        print_table(result['rows'], sys.stdout)


def handle_add_tag(args, reference: Reference, client: RegistryClient):
    """Handle add-tag mode: point a new tag at the given tag's manifest."""
    add_op = AddTagOperation(client)

    result = add_op.add_tag(reference, args.new_tag)

    if args.json:
        print_json_output({
            "Operation": "AddTag",
            "Tag": result['tag'],
            "Image": args.image
        }, sys.stdout)
    else:
        print(f"{args.new_tag} added to {args.image}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='regtag',
        description='Lists the tags that share an image with a given tag, or adds a tag to an image, '
                    'on a container registry.',
        epilog='list alternative tags: regtag registry/image:tag\n'
               'add a tag:             regtag registry/image:tag extratag\n'
               '\n'
               'docker login credentials are used unless --creds is given.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('image', nargs='?', help='Image to inspect or tag ([scheme://]registry/repo[:tag])')
    parser.add_argument('new_tag', nargs='?', help='Tag to add to the image')
    parser.add_argument(
        '--creds',
        help='Use [username[:password]] for accessing the registry'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON'
    )
    parser.add_argument(
        '--no-progress',
        action='store_true',
        help="Don't show a progress bar while checking tags"
    )
    parser.add_argument(
        '--log-level',
        choices=list(LOG_LEVELS),
        help='Set logging level (default: WARNING)'
    )
    parser.add_argument(
        '--log-file',
        help='Log to file in addition to console'
    )
    return parser


def get_credential_resolver(args, config: Config) -> CredentialResolver:
    """--creds overrides the docker login lookup entirely."""
    if args.creds is not None:
        return StaticCredentialResolver(parse_creds(args.creds))
    return DockerCredentialResolver(config.docker_config)


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.image is None:
        parser.print_help(sys.stdout)
        sys.exit(0)

    try:
        with error_context("loading config failed"):
            config = Config()
            config.validate()
        setup_logging(args.log_level or config.log_level, args.log_file)

        with error_context("parsing failed"):
            reference = parse_reference(args.image)
            if args.new_tag is not None and not args.new_tag:
                raise ParseError("new tag is empty")

        with error_context("parsing docker authentication failed"):
            credentials = get_credential_resolver(args, config).resolve(reference.registry)

        client = RegistryClient(credentials)

        if args.new_tag is None:
            handle_list(args, reference, client, config)
        else:
            handle_add_tag(args, reference, client)

    except RegtagError as e:
        logger.debug("regtag failed", exc_info=True)
        print(f"{e.context or 'regtag failed'}: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"regtag failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()

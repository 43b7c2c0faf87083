"""Build command implementation"""

from pathlib import Path

import click

from ..utils.output import format_build_result, show_build_plan, print_error, print_warning
from ...api.builder import Builder
from ...api.exceptions import DebToolError
from ...core import check_metadata
from ...constants import MSG_BUILD_FAILED
from ...models import BuildRequest
from ...services import load_config


@click.command()
@click.argument('target', type=click.Path(path_type=Path))
@click.option('--name', '-n', help='Package name (inferred from the target by default)')
@click.option('--version', '-V', 'version',
              help='Package version (default: 1.0-YYMMDD-HHMMSS[-commit])')
@click.option('--output', '-o', type=click.Path(path_type=Path),
              help='Output file (default: NAME-VERSION.deb)')
@click.option('--short-description', '-s', help='One-line package description')
@click.option('--long-description', '-l', help='Extended package description')
@click.option('--author', '-a', 'author_name', help='Maintainer name')
@click.option('--email', '-e', 'author_email', help='Maintainer email')
@click.option('--prefix', '-p', 'install_prefix',
              help='Install location of the target content (default: /)')
@click.option('--config', '-c', 'config_path', type=click.Path(path_type=Path),
              help='Configuration file (default: ./.deb-tool.yaml)')
@click.option('--dry-run', is_flag=True, help='Show the package plan without building')
@click.pass_context
def build(ctx, target, name, version, output, short_description, long_description,
          author_name, author_email, install_prefix, config_path, dry_run):
    """Build a .deb package from TARGET

    TARGET may be a single executable, a directory tree or a source
    checkout.

    Examples:
        deb-tool build ./build
        deb-tool build ./myscript -p /usr/bin -s " My script"
        deb-tool build . --name mytool --version 2.0 -o dist/mytool.deb
    """
    request = BuildRequest(
        target=target,
        name=name,
        version=version,
        output=output,
        short_description=short_description,
        long_description=long_description,
        author_name=author_name,
        author_email=author_email,
        install_prefix=install_prefix,
    )

    try:
        config = load_config(config_path)
        builder = Builder(config)

        if dry_run:
            plan = builder.plan(request)
            show_build_plan(plan)
            for warning in check_metadata(plan.metadata).warnings:
                print_warning(warning)
            return
    except DebToolError as e:
        print_error(MSG_BUILD_FAILED.format(stage=e.stage, error=e))
        ctx.exit(1)

    result = builder.build(request)
    format_build_result(result)

    if not result.success:
        ctx.exit(1)

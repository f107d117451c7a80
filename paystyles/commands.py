from flask.cli import with_appcontext
from flask import current_app
import click
from paystyles import db
from paystyles.styles.render import build_page_styles, normalize_form_ids
from paystyles.styles.store import settings_store
from paystyles.styles.themes import theme_catalog


@click.command('purge-styles')
@click.option('--form-id', type=int, default=None, help='Only purge this form')
@with_appcontext
def purge_styles(form_id):
    """Delete stored style settings for every form (or one form)"""
    try:
        deleted = settings_store.purge(form_id)
        db.session.commit()
        scope = f"form {form_id}" if form_id is not None else "all forms"
        click.echo(f"Deleted {deleted} style settings for {scope}")
        current_app.logger.info(f"Purged {deleted} style settings for {scope}")
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error purging style settings: {e}")
        click.echo(f"Error purging style settings: {str(e)}")


@click.command('list-themes')
@with_appcontext
def list_themes():
    """Print the theme preset catalog"""
    for preset in theme_catalog.presets():
        colors = preset.palette
        click.echo(
            f"{preset.id:<12} {preset.name:<12} "
            f"primary={colors.primary} secondary={colors.secondary} "
            f"text={colors.text} background={colors.background}"
        )


@click.command('render-css')
@click.argument('form_ids', nargs=-1, required=True)
@with_appcontext
def render_css(form_ids):
    """Print the CSS a page rendering these forms would get"""
    ids = normalize_form_ids(form_ids)
    css = build_page_styles(ids)
    if not css:
        click.echo(f"No styleable forms among {list(form_ids)}")
        return
    click.echo(css, nl=False)


def init_commands(app):
    app.cli.add_command(purge_styles)
    app.cli.add_command(list_themes)
    app.cli.add_command(render_css)

import io

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

BANNER_WIDTH = 72

TITLE_ART = r"""
     _                                _     _
  __| | _____   __     __  ____  __ _| | __| |
 / _` |/ _ \ \ / /____ \ \/ /\ \/ // _` |/ _` |
| (_| |  __/\ V /_____| >  <  >  <| (_| | (_| |
 \__,_|\___| \_/       /_/\_\/_/\_\\__,_|\__,_|
""".strip('\n')


def banner_links(site):
    """Пары (подпись, url) для блока ссылок."""
    links = [('Website', site.get('url'))]
    site_links = site.get('links') or {}
    if site_links.get('github'):
        links.append(('GitHub', site_links['github']))
    if site_links.get('linkedin'):
        links.append(('LinkedIn', site_links['linkedin']))
    return [(label, url) for label, url in links if url]


def render_banner(site, color=True):
    """
    Текстовый баннер для curl/wget: рамка с ASCII-артом, приветствие и ссылки.
    color=False — без ANSI-последовательностей.
    """
    buf = io.StringIO()
    console = Console(
        file=buf,
        width=BANNER_WIDTH,
        force_terminal=color,
        color_system='standard' if color else None,
        highlight=False,
    )

    title = Text(TITLE_ART, style='bold cyan', no_wrap=True)
    subtitle = Text(site.get('name', ''), style='bold magenta', justify='center')
    role = site.get('role')
    if role:
        subtitle.append(f"  ·  {role}", style='dim')

    console.print(Panel(
        Group(title, Text(''), subtitle),
        box=box.DOUBLE,
        border_style='magenta',
        padding=(1, 4),
        width=BANNER_WIDTH,
    ))

    console.print(Text("👋 Hello CLI user!", style='bold'))
    console.print("You hit this endpoint because you're using curl/wget.")
    console.print()

    links = Table.grid(padding=(0, 2))
    links.add_column(style='bold green', no_wrap=True)
    links.add_column(style='underline', no_wrap=True)
    for label, url in banner_links(site):
        links.add_row(f"{label}:", url)
    console.print(Text('Links', style='bold yellow'))
    console.print(links)
    console.print()

    url = site.get('url')
    if url:
        console.print(Text(f"Open {url} in a browser for the full site.", style='dim'))

    return buf.getvalue()

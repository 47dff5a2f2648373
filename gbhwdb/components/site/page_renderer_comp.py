"""Default page renderer.

Plain Jinja2 listing of the page payload, without styling. Any callable with
the same signature (PageDeclaration -> HTML string) can replace it.
"""

from __future__ import annotations

from jinja2 import Environment

from gbhwdb.helpers.dto.page_dto import PageDeclaration

SITE_NAME = "Game Boy hardware database"

_jinja_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

PAGE_TEMPLATE = _jinja_env.from_string(
    """<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }} - {{ site_name }}</title>
</head>
<body>
<main>
{% if page_type == "index" %}
<h1>{{ title }}</h1>
{% if props.mappers %}
<nav>
<h2>Mappers</h2>
<ul>
{% for mapper in props.mappers %}
<li><a href="{{ mapper.value }}.html">{{ mapper.value }}</a></li>
{% endfor %}
</ul>
</nav>
{% endif %}
<table>
<thead><tr><th>Game</th><th>Platform</th><th>Submissions</th></tr></thead>
<tbody>
{% for game in props.games %}
<tr>
<td>{{ game.display_name }}</td>
<td>{{ game.cfg.platform.display_name if game.cfg else "" }}</td>
<td>{{ game.submissions | length }}</td>
</tr>
{% endfor %}
</tbody>
</table>
{% else %}
<h1>{{ props.mapper.value }}</h1>
<table>
<thead><tr><th>Submission</th><th>Game</th><th>Board</th><th>Mapper</th><th>Photos</th></tr></thead>
<tbody>
{% for submission in props.submissions %}
<tr>
<td>{{ submission.title or submission.slug or "" }}
{%- if submission.contributor %} ({{ submission.contributor }}){% endif %}</td>
<td>{{ submission.type }}</td>
<td>{{ submission.metadata.board.type or "" }}</td>
<td>{{ submission.mapper_kind() or "" }}</td>
<td>{% for slot, photo in submission.photos.present() %}<a href="/{{ photo.path }}">{{ slot }}</a> {% endfor %}</td>
</tr>
{% endfor %}
</tbody>
</table>
{% endif %}
</main>
</body>
</html>
"""
)


def render_page(page: PageDeclaration) -> str:
    """Render a page declaration to an HTML document (without doctype)."""
    return PAGE_TEMPLATE.render(
        page_type=page.type,
        title=page.title,
        site_name=SITE_NAME,
        props=page.props,
    )

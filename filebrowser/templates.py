from __future__ import annotations

from jinja2 import Environment, StrictUndefined, Template

_environment = Environment(autoescape=True, undefined=StrictUndefined)

FILES_ONLY_HTML_TEMPLATE = """
  <strong>{{ unescaped_path }}</strong><br><br>

  <table>
    {% for file in files %}
      <tr>
      <td>
        {{ file.mode_string }}
      </td>
      <td>
        {{ file.mtime.strftime('%b %d %Y') }}
      </td>

      <td>
      {% if file.is_dir %}
        {% if path != '/' %}
          <a href="?path={{ path | urlencode }}%2f{{ file.name | urlencode }}">
        {% else %}
          <a href="?path={{ file.name | urlencode }}">
        {% endif %}
      {% endif %}

      {{ file.name }}

      {% if file.is_dir %}
        </a>
      {% endif %}
      </td>
      <td>
        {{ file.size }}
      </td>
      </tr>
    {% endfor %}
  </table>
"""

STANDALONE_HTML_TEMPLATE = (
    """
<html>
<body>
"""
    + FILES_ONLY_HTML_TEMPLATE
    + """
</body>
</html>
"""
)

TEMPLATES = {
    'files_only': FILES_ONLY_HTML_TEMPLATE,
    'standalone': STANDALONE_HTML_TEMPLATE,
}


def compile_template(source: str) -> Template:
    """Parse a listing template.

    Rendering gets ``files``, ``path`` and ``unescaped_path``. Names are
    HTML-escaped and any undefined variable fails the render.
    """
    return _environment.from_string(source)

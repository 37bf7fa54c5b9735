"""Document stylesheet applied to every rendered PDF."""

from __future__ import annotations

BASE_CSS = """
body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
  line-height: 1.6;
  color: #333;
  max-width: 800px;
  margin: 0 auto;
  padding: 40px 20px;
}

/* Headings */
h1, h2, h3, h4, h5, h6 {
  margin-top: 1.5em;
  margin-bottom: 0.5em;
  font-weight: 600;
  line-height: 1.25;
  color: #2c3e50;
}

h1 {
  font-size: 2.5em;
  border-bottom: 3px solid #3498db;
  padding-bottom: 0.3em;
  margin-top: 0;
}

h2 {
  font-size: 2em;
  border-bottom: 2px solid #7f8c8d;
  padding-bottom: 0.3em;
}

h3 {
  font-size: 1.5em;
  color: #34495e;
}

h4 {
  font-size: 1.25em;
}

p {
  margin-bottom: 1em;
}

ul, ol {
  margin-bottom: 1em;
  padding-left: 2em;
}

li {
  margin-bottom: 0.25em;
}

/* Task lists */
.task-list-item {
  list-style-type: none;
  margin-left: -1.5em;
}

.task-list-item input[type="checkbox"] {
  margin-right: 0.5em;
}

/* Code */
pre {
  background: #f4f4f4;
  border: 1px solid #ddd;
  border-radius: 4px;
  padding: 1em;
  overflow-x: auto;
  margin: 1em 0;
}

code {
  font-family: 'Courier New', Courier, monospace;
  font-size: 0.9em;
}

p code, li code {
  background: #f4f4f4;
  padding: 0.2em 0.4em;
  border-radius: 3px;
}

a {
  color: #3498db;
  text-decoration: none;
}

a:hover {
  text-decoration: underline;
}

/* Tables */
table {
  border-collapse: collapse;
  width: 100%;
  margin: 1em 0;
}

th, td {
  border: 1px solid #ddd;
  padding: 8px 12px;
  text-align: left;
}

th {
  background: #f4f4f4;
  font-weight: 600;
}

tr:nth-child(even) {
  background: #f9f9f9;
}

blockquote {
  border-left: 4px solid #3498db;
  margin: 1em 0;
  padding-left: 1em;
  color: #666;
  font-style: italic;
}

hr {
  border: none;
  border-top: 2px solid #ddd;
  margin: 2em 0;
}

img {
  max-width: 100%;
  height: auto;
}
"""

# The first h1/h2 is exempt so the document does not open on a blank page.
SECTION_BREAK_CSS = """
/* Page breaks on H1 and H2 headings */
h1, h2 {
  break-before: page;
  page-break-before: always;
}

h1:first-of-type, h2:first-of-type {
  break-before: auto;
  page-break-before: auto;
}
"""


def build_css(page_break_sections: bool = False) -> str:
    if page_break_sections:
        return BASE_CSS + SECTION_BREAK_CSS
    return BASE_CSS


__all__ = ["BASE_CSS", "SECTION_BREAK_CSS", "build_css"]

#
# Copyright (c) 2024-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import html
import sys
import textwrap


from typing import Sequence, Any, TextIO
from abc import ABC, abstractmethod


class Report(ABC):

    def start(self, title:str) -> None:
        pass

    @abstractmethod
    def write_heading(self, heading:str, level:int=1) -> None:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    def write_paragraph(self, paragraph:str) -> None:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    def write_table(self, rows:list[list], header:Sequence[Any]|None=None, just:str|None=None) -> None:  # pragma: no cover
        raise NotImplementedError

    @staticmethod
    def format(field:Any) -> str:
        if field is None or field != field:
            return ''
        else:
            return str(field)

    def end(self) -> None:
        pass


class TextReport(Report):

    _just = {
        'c': str.center,
        'l': str.ljust,
        'r': str.rjust,
    }

    def __init__(self, stream:TextIO=sys.stdout):
        self.stream = stream
        self.heading_sep = ''

    def _isatty(self) -> bool:
        isatty = getattr(self.stream, 'isatty', None)
        return isatty is not None and isatty()

    def write_heading(self, heading:str, level:int=1) -> None:
        if level <= 1:
            heading = heading.upper()
        if sys.platform != 'win32' and self._isatty():
            # Ansi escape
            heading = '\33[1m' + heading + '\33[0m'
        self.stream.write(self.heading_sep + heading + '\n\n')
        self.heading_sep = ''

    def write_paragraph(self, paragraph:str) -> None:
        paragraph = '\n'.join(textwrap.wrap(paragraph, width=80))
        self.stream.write(paragraph + '\n\n')
        self.heading_sep = '\n'

    def write_table(self, rows:list[list], header:Sequence[Any]|None=None, just:str|None=None) -> None:
        cells = [[self.format(field) for field in row] for row in rows]
        if header is not None:
            cells.insert(0, [self.format(field) for field in header])

        ncols = len(cells[0])
        assert all(len(row) == ncols for row in cells)
        if just is None:
            just = 'l' * ncols
        assert len(just) == ncols

        widths = [max(len(row[c]) for row in cells) for c in range(ncols)]

        sep = '  '
        lines = []
        for row in cells:
            line = sep.join(self._just[j](cell, width) for cell, j, width in zip(row, just, widths))
            lines.append(line.rstrip())
        if header is not None:
            lines.insert(1, '─' * len(sep.join(' '*width for width in widths)))

        self.stream.write('\n'.join(lines) + '\n\n')
        self.heading_sep = '\n'


class HtmlReport(Report):

    _css = '''
body {
  font-family: "Noto Sans Mono", monospace;
  font-size: 0.875rem;
  background-color: white;
}

h1, h2, h3 {
  font-size: 100%;
  font-weight: bold;
  text-transform: uppercase;
  margin-top: 2em;
  margin-bottom: 1em;
}

.text-center { text-align: center; }
.text-right { text-align: right; }
.text-left { text-align: left; }

.table {
  margin: 1em 0 1em 2ch;
  border-spacing: 0;
}

thead tr th {
  border-bottom: 1.5px solid;
  border-collapse: collapse;
}

th, td {
  padding: 0.25em 1ch 0.25em 1ch;
}
'''

    _just = {
        'c': 'text-center',
        'l': 'text-left',
        'r': 'text-right',
    }

    def __init__(self, stream:TextIO):
        self.stream = stream

    def start(self, title:str) -> None:
        title = html.escape(title)
        self.stream.write(f'''<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>{self._css}</style>
</head>
<body>
<h1>{title}</h1>
''')

    def write_heading(self, heading:str, level:int=1) -> None:
        level += 1
        heading = html.escape(heading)
        self.stream.write(f'\n<h{level}>{heading}</h{level}>\n\n')

    def write_paragraph(self, paragraph:str) -> None:
        paragraph = html.escape(paragraph)
        self.stream.write(f'<p>{paragraph}</p>\n\n')

    @staticmethod
    def format_and_escape(field:Any) -> str:
        field = Report.format(field)
        field = html.escape(field)
        return field

    def write_table(self, rows:list[list], header:Sequence[Any]|None=None, just:str|None=None) -> None:
        fmt = self.format_and_escape

        if just is None:
            classes = ['text-left'] * max(len(row) for row in rows)
        else:
            classes = [self._just[j] for j in just]

        self.stream.write('<table class="table">\n')
        if header:
            self.stream.write('<thead><tr>' + ''.join([f'<th class="{c}">{fmt(field)}</th>' for field, c in zip(header, classes)]) + '</tr></thead>\n')
        self.stream.write('<tbody>\n')
        for row in rows:
            self.stream.write('<tr>' + ''.join([f'<td class="{c}">{fmt(field)}</td>' for field, c in zip(row, classes)]) + '</tr>\n')
        self.stream.write('</tbody>\n')
        self.stream.write('</table>\n')

    def end(self) -> None:
        self.stream.write('\n')
        self.stream.write('</body>\n')
        self.stream.write('</html>\n')

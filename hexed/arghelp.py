# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import re
from argparse import HelpFormatter, Action, ArgumentParser, SUPPRESS
from typing import Optional, Iterable, List

from pytermor import fmt

from .byteio.const import Base


class CustomHelpFormatter(HelpFormatter):
    INDENT_INCREMENT = 2
    INDENT = ' ' * INDENT_INCREMENT

    @staticmethod
    def format_header(title: str) -> str:
        return fmt.bold(title.upper())

    def __init__(self, prog):
        super().__init__(prog, max_help_position=30, indent_increment=self.INDENT_INCREMENT)

    def start_section(self, heading: Optional[str]):
        super().start_section(self.format_header(heading))

    def add_usage(self, usage: Optional[str], actions: Iterable[Action], groups: Iterable,
                  prefix: Optional[str] = ...):
        super().add_text(self.format_header('usage'))

        usage = usage.replace("\n", f"\n{self.INDENT}")
        super().add_usage(usage, actions, groups, prefix=self.INDENT)

    def add_examples(self, examples: List[str]):
        self.start_section('example' + ('s' if len(examples) > 1 else ''))
        self._add_item(self._format_text, ['\n'.join(examples)])
        self.end_section()

    def _format_action_invocation(self, action):
        # same as in superclass, but without printing argument for short options
        if not action.option_strings:
            default = self._get_default_metavar_for_positional(action)
            metavar, = self._metavar_formatter(action, default)(1)
            return metavar
        else:
            parts = []
            if action.nargs == 0:
                parts.extend(action.option_strings)
            else:
                default = self._get_default_metavar_for_optional(action)
                args_string = self._format_args(action, default)
                for option_string in action.option_strings:
                    if len(option_string) > 2 or len(action.option_strings) == 1:
                        parts.append(f'{option_string} {args_string}')
                    else:
                        parts.append(option_string)

            return ', '.join(parts)

    def _format_text(self, text: str) -> str:
        return super()._format_text(text).rstrip('\n') + '\n'

    def _fill_text(self, text, width, indent):
        return ''.join(indent + line for line in text.splitlines(keepends=True))


class CustomArgumentParser(ArgumentParser):
    def __init__(self, examples: List[str] = None, epilog: List[str] = None, usage: List[str] = None, **kwargs):
        self.examples = examples
        kwargs.update({
            'epilog': '\n'.join(epilog or []),
            'usage': '\n'.join(usage or []) or None,
        })
        super(CustomArgumentParser, self).__init__(**kwargs)

    def format_help(self) -> str:
        formatter = self._get_formatter()
        if self.epilog:
            formatter.add_text(' ')
            formatter.add_text(self.epilog)
        if self.examples and isinstance(formatter, CustomHelpFormatter):
            formatter.add_examples(self.examples)

        ending_formatted = formatter.format_help()
        self.epilog = None

        result = super().format_help() + ending_formatted
        # remove ':' from headers ('<_b>header:<_f>'):
        result = re.sub(r'(\033\[[0-9;]*m)?\s*:\s*(\n|\033|$)', r'\1\2', result)
        return result


class AppArgumentParser(CustomArgumentParser):
    def __init__(self):
        fmt_u = fmt.underlined
        fmt_default = fmt.yellow

        super().__init__(
            description='Hex dump viewer with byte class highlighting',
            usage=[
                '%(prog)s [<options>] <file>',
                '%(prog)s --legend',
                '%(prog)s --version',
                '%(prog)s --help',
            ],
            epilog=[
                f'Rows are {Base.HEX.row_width} bytes wide in hexadecimal mode and {Base.OCTAL.row_width} bytes wide'
                ' in octal mode. Offset labels are always relative to the first dumped byte. Interrupting the app'
                ' with Ctrl+C stops the dump after the current row and prints the summary.',
                '',
                '(c) 2022 A. Shavykin <0.delameter@gmail.com>',
            ],
            examples=[
                'Dump the whole file',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} file.bin",
                '',
                'Dump 64 bytes starting from byte 512, in octal, without colors',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -s{fmt_u(512)} -n{fmt_u(64)} -oC file.bin",
                '',
                'Display byte class color map',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} --legend",
                '\n'
            ],
            add_help=False,
            formatter_class=lambda prog: CustomHelpFormatter(prog),
            prog='hexed'
        )

        self.add_argument('filename', metavar='<file>', nargs='?', help='file to dump')

        modes_group = self.add_argument_group('operating mode')
        modes_group.add_argument('-l', '--legend', action='store_true', default=False, help='show byte class color map and exit')
        modes_group.add_argument('-v', '--version', action='store_true', default=False, help='show app version and exit')
        modes_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')

        bytes_group = self.add_argument_group('byte range options')
        bytes_group.add_argument('-n', '--length', metavar='<num>', action='store', default=None, help='limit the amount of bytes to display '+fmt_default('[default: until EOF]'))
        bytes_group.add_argument('-s', '--skip', metavar='<num>', action='store', default=None, help='skip the first <num> bytes '+fmt_default('[default: 0]'))

        display_group = self.add_argument_group('display options')
        display_group.add_argument('-o', '--octal', action='store_true', default=False, help='display the bytes as octal numbers '+fmt_default('[default: hex]'))
        display_group.add_argument('-G', '--no-guides', action='store_true', default=False, help='disable offset guides')
        display_group.add_argument('-C', '--no-colors', action='store_true', default=False, help='disable colors in the output')
        display_group.add_argument('-A', '--no-ascii', action='store_true', default=False, help='disable the ASCII sidebar')

        generic_group = self.add_argument_group('generic options')
        generic_group.add_argument('-d', '--debug', action='count', default=0, help='enable debug mode; can be used from 1 to 3 times, each level increases verbosity (-d|dd|ddd)')

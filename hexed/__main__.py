# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from . import App


def main():
    App().run()


if __name__ == '__main__':
    main()

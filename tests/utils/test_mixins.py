
import re

from geocells.utils.mixins import LoggingMixin


class Foo(LoggingMixin):
    pass


class Bar(LoggingMixin):
    pass


def test_logger_name():
    assert Foo().logger.name.endswith('Foo')
    assert Foo('custom').logger.name.endswith('Foo.custom')


def test_warn_once(caplog):
    foo = Foo()
    foo.warn_once('mixin %s', 'warning')
    assert 'mixin warning' in caplog.text

    Foo().warn_once('mixin %s', 'warning')
    assert len(re.findall('mixin warning', caplog.text)) == 1

    # Each logger warns once on its own
    Bar().warn_once('mixin %s', 'warning')
    assert len(re.findall('mixin warning', caplog.text)) == 2

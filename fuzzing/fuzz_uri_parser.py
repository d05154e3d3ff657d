import sys

import atheris


with atheris.instrument_imports():
    from uriparts.buffer import Buffer
    from uriparts.exceptions import CapacityExceeded, InvalidURI
    from uriparts.parser import Form, Parser


def test_one_input(data):
    fdp = atheris.FuzzedDataProvider(data)
    form = fdp.PickValueInList(list(Form))
    capacity = fdp.PickValueInList([None, 16, 256])
    uri = fdp.ConsumeBytes(atheris.ALL_REMAINING)

    parser = Parser(capacity)
    buffer = Buffer(capacity)
    try:
        parts = parser.parse(uri, buffer, form)
    except (
        InvalidURI,  # URI isn't valid
        CapacityExceeded,  # decoded URI doesn't fit in the buffer
    ):
        assert len(buffer) == 0
        return

    # Spans are disjoint and in order.
    end = 0
    for component in buffer:
        span = buffer.span(component)
        assert end <= span.start <= span.end <= len(buffer)
        end = span.end

    # Ports are valid TCP ports.
    assert parts.port_number is None or 0 <= parts.port_number <= 65535

    # Parsing is deterministic.
    assert parser.parse(uri, form=form) == parts


def main():
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()

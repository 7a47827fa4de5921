from typing import List, Optional, Tuple


class Header:
    def __init__(self, name: bytes, value: bytes):
        self.name = name
        self.value = value

    def __repr__(self):
        return f"<Header {self.name}: {self.value}>"

    def __iter__(self):
        yield self.name
        yield self.value

    @classmethod
    def from_line(cls, line: str) -> "Header":
        """
        Creates a header from a raw header line, like "Set-Cookie: a=b".
        """
        name, separator, value = line.partition(":")
        if not separator or not name.strip():
            raise ValueError(f"Invalid header line: {line!r}")
        return cls(name.strip().encode(), value.strip().encode())


class Headers:
    """
    Ordered collection of response headers. Names are compared without case
    sensitivity and repeated names are kept, since a response can carry
    several Set-Cookie headers.
    """

    def __init__(self, values: Optional[List[Tuple[bytes, bytes]]] = None):
        self.values = values if values is not None else []

    def get(self, name: bytes) -> Tuple[bytes, ...]:
        name = name.lower()
        return tuple(value for key, value in self.values if key.lower() == name)

    def get_first(self, name: bytes) -> Optional[bytes]:
        name = name.lower()
        for key, value in self.values:
            if key.lower() == name:
                return value
        return None

    def add(self, name: bytes, value: bytes) -> None:
        self.values.append((name, value))

    def add_header(self, header: Header) -> None:
        self.add(header.name, header.value)

    def contains(self, name: bytes) -> bool:
        return self.get_first(name) is not None

    def __contains__(self, name: bytes) -> bool:
        return self.contains(name)

    def __iter__(self):
        yield from self.values

    def __len__(self):
        return len(self.values)

    def __repr__(self):
        return f"<Headers {self.values}>"

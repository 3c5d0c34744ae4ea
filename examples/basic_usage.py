#!/usr/bin/env python3
"""Basic usage example for marshalwire.

This example demonstrates:
1. Encoding a Pydantic model and plain Python values
2. Decoding back to Python objects
3. Reading a stream written by an interning producer
4. Handling truncated input
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from marshalwire import UNSUPPORTED, DecodeError, Marshaller, decode, encode, iter_decode


class StatusReport(BaseModel):
    """Vehicle status report."""

    vehicle_id: int = Field(ge=0, le=255)
    depth_m: float
    callsign: str
    active: bool


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("marshalwire Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding a status report...")
    report = StatusReport(vehicle_id=42, depth_m=25.75, callsign="AUV-1", active=True)
    data = encode(report)
    print(f"   {len(data)} bytes: {data!r}")
    print()

    print("2. Decoding it back...")
    fields = decode(data)
    print(f"   {fields}")
    print(f"   Validated: {StatusReport.model_validate(fields)}")
    print()

    print("3. Reading a stream with interned strings...")
    stream = Marshaller()
    stream.write_list_header(3)
    stream.write_unicode("survey")
    stream.write_int(7)
    stream.write_double(0.5)
    foreign = b"[\x03\x00\x00\x00t\x02\x00\x00\x00hiR\x00\x00\x00\x00<"
    for value in iter_decode(stream.getvalue() + foreign):
        marker = " (contains placeholder)" if UNSUPPORTED in value else ""
        print(f"   {value}{marker}")
    print()

    print("4. Truncated input...")
    try:
        decode(data[:10])
    except DecodeError as e:
        print(f"   {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()

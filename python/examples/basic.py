from dataclasses import dataclass

from bunyan_log import BufferSink, Level, Logger, Pairs, create, fields, repr_fields

@dataclass
class Order:
    symbol: str
    qty: int

def main():
    log = create("py-basic")
    order = Order(symbol="AAPL", qty=10)

    log.info(fields(order=order), "order.accepted")
    log.warn(Pairs([("attempt", 1), ("attempt", 2)]), "order.retry")
    log.debug(repr_fields(order=order), "order.debug")  # dropped unless LOG_LEVEL=debug
    log.error("socket closed", "bus.disconnected")      # a bare value lands under "_"
    log.info((), "shutdown")

    quiet = Logger("py-basic-quiet", min_level=Level.ERROR, sink=BufferSink())
    quiet.info({"ignored": True}, "never.written")
    print("buffered bytes:", len(quiet.sink.getvalue()))

if __name__ == "__main__":
    main()

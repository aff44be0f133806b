class TransferSimError(Exception):
    """
    Base exception used as the parent class for all exceptions raised by this package.

    Calling code should catch `TransferSimError` and derived classes separately before general
    exceptions, e.g.:

    ```
    try:
        transfersim.some_function()
    except SpecificTransferSimError:
        ... # handle a specific exception
    except TransferSimError:
        ... # handle non-specific transfersim exception
    except Exception:
        ... # handle exceptions raised by 3rd party dependencies or Python built-ins
    ```

    An optional string-formatted message may be attached to the exception and retrieved by accessing
    the `.message` attribute.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class TransferSimValueError(TransferSimError): ...


class TransferSimTypeError(TransferSimError): ...

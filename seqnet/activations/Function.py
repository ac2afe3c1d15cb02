class Function:
    """Scalar nonlinearity applied elementwise by the Activation layer."""

    def out(self, x):
        raise NotImplementedError

    def d_out(self, x):
        # Return (out(x), derivative of out at x)
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"

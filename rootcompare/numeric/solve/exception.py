# Written October 2026.


# ======================================================================

class SolverError(RuntimeError):
    """
    Base class for errors raised when a root finding problem cannot be
    attempted as given.  Values useful for diagnosing the problem can be
    attached as attributes, and are listed under the message when the
    error is printed.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.  The first is normally the message.
        flag : int, default = None
            Optional numeric status code.
        details : str, default = None
            Optional extra description of the problem.
        kwargs :
            Any other values to store as attributes (e.g. the function
            values that caused the problem).
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        self.__dict__.update(kwargs)

    def __str__(self):
        """Message followed by one `name -> value` line per attribute."""
        lines = [super().__str__()]
        lines += [f"{k} -> {v}" for k, v in vars(self).items()
                  if v is not None]
        return "\n".join(lines)


# ----------------------------------------------------------------------

class SameSignError(SolverError):
    """
    Raised when a function has the same sign at both ends of a search
    interval, so that the interval does not bracket a root.  This is
    the only failure reported by `find_root`; no solver is run when it
    occurs.

    Attributes
    ----------
    x_a, x_b : float
        Ends of the (normalised) search interval.
    f_a, f_b : float
        Function values at `x_a` and `x_b`.
    """
    message = "Function has same sign on both sides of the range."

    def __init__(self, *args, x_a: float = None, x_b: float = None,
                 f_a: float = None, f_b: float = None, **kwargs):
        if not args:
            args = (self.message,)
        super().__init__(*args, x_a=x_a, x_b=x_b, f_a=f_a, f_b=f_b,
                         **kwargs)

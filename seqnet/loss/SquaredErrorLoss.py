from ..helpers.Backend import backend


class SquaredErrorLoss:
    def __init__(self):
        # cache from forward
        self.prediction = None
        self.target = None

    def forward(self, prediction, target):
        """
        prediction, target: (out,)
        returns: 0.5 * sum((prediction - target)^2)
        The 1/2 makes backward() exactly prediction - target.
        """
        prediction = backend.ensure_array(prediction)
        target = backend.ensure_array(target)
        if prediction.shape != target.shape:
            raise ValueError(
                f"Prediction shape {tuple(prediction.shape)} does not match target shape {tuple(target.shape)}"
            )
        self.prediction = prediction
        self.target = target
        diff = prediction - target
        return float(backend.to_cpu(0.5 * backend.sum(diff * diff)))

    def backward(self):
        """dL/dprediction = prediction - target, un-normalized."""
        if self.prediction is None or self.target is None:
            raise ValueError("Must call forward() before backward()")
        return self.prediction - self.target

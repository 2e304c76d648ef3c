from minilisp.evaluation.evaluator import evaluate, evaluate_list

__all__ = ["evaluate", "evaluate_list"]

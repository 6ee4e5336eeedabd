def total(values):
    result = sum(values)
    print("total:", result)
    return result

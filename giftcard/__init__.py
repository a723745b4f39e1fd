""" Balance and statement client for The Perfect Gift Card website """

# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


from abc import ABC, abstractmethod

class ODEModel(ABC):
    def __init__(self, params=None):
        self.params = params

    @abstractmethod
    def rhs(self, t, x, d):
        pass

    def __call__(self, t, x, d):
        return self.rhs(t, x, d)

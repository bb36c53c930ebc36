import math
from dataclasses import dataclass

BURST_SIZE = 14
SPEED_RANGE = (1.2, 4.4)
RADIUS_RANGE = (1.2, 3.4)
LIFE_RANGE = (18, 32)
DAMPING = 0.98


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    life: int


class ParticleSystem:
    """Short-lived radial bursts spawned by ball contacts.

    ``rng`` only needs ``uniform(low, high)`` and ``integers(low, high)``,
    so a ``numpy.random.Generator`` works, as does a scripted stand-in.
    """

    def __init__(self, rng):
        self.rng = rng
        self.particles = []

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def spawn_burst(self, x, y, count=BURST_SIZE):
        for _ in range(count):
            angle = self.rng.uniform(0, 2 * math.pi)
            speed = self.rng.uniform(*SPEED_RANGE)
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
                radius=float(self.rng.uniform(*RADIUS_RANGE)),
                # integers() excludes the upper bound
                life=int(self.rng.integers(LIFE_RANGE[0], LIFE_RANGE[1] + 1)),
            ))

    def advance(self):
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.vx *= DAMPING
            p.vy *= DAMPING
            p.life -= 1
        self.particles = [p for p in self.particles if p.life > 0]

    def clear(self):
        self.particles = []

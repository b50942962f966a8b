import hypothesis.strategies

from torchlti.filter import Domain

domains = hypothesis.strategies.sampled_from([Domain.Z, Domain.S])

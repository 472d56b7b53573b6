from bitarray import bitarray


class BitWriter:
    """
    Записувач бітів у bitarray з вирівнюванням до байта.
    Використовується для упакованого формату пар LZ78.
    """

    def __init__(self):
        self.bits = bitarray(endian="big")  # старший біт байта йде першим

    def write_bits_msb(self, value: int, length: int):
        """
        Записує length бітів зі значення value (старший біт першим, MSB first).
        """
        if length < 0:
            raise ValueError("Довжина не може бути негативною")
        if value >> length:
            raise ValueError(f"Значення {value} не вміщується у {length} біт")
        for i in range(length - 1, -1, -1):
            self.bits.append((value >> i) & 1)

    def byte_align(self):
        """
        Додає нулі до вирівнювання в байт.
        """
        while len(self.bits) % 8 != 0:
            self.bits.append(0)

    def __len__(self):
        return len(self.bits)

    def to_bytes(self) -> bytes:
        """
        Вирівнює потік і повертає його як bytes.
        """
        self.byte_align()
        return self.bits.tobytes()

from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple


class Encoder(ABC):
    """
    Інтерфейс, що описує кодування потоку байтів
    з використанням словникових алгоритмів.
    """

    @abstractmethod
    def encode(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Читає всі байти з вхідного потоку, виконує над ними алгоритм
        кодування та записує результат у вказаний вихідний потік.

        Args:
            input_stream: Вхідний потік для даних
            output_stream: Вихідний потік для запису закодованих даних

        Returns:
            Рядок з інформацією для логування
        """
        pass

    @classmethod
    def encode_file(cls, input_file: str, output_file: str, **options) -> str:
        """
        Допоміжний метод для кодування файлу.

        Args:
            input_file: Шлях до вхідного файлу
            output_file: Шлях до вихідного файлу
            **options: Параметри конструктора кодера

        Returns:
            Інформація про кодування
        """
        encoder = cls(**options)
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            return encoder.encode(in_file, out_file)

    @classmethod
    def encode_bytes(cls, data: bytes, **options) -> Tuple[bytes, str]:
        """
        Допоміжний метод для кодування байтів.

        Args:
            data: Вхідні дані для кодування
            **options: Параметри конструктора кодера

        Returns:
            Кортеж (закодовані дані, інформація про кодування)
        """
        encoder = cls(**options)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = encoder.encode(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info
